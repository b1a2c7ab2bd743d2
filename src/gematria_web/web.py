from __future__ import annotations
import argparse
from flask import Flask, request, jsonify

from gematria import config as CFG
from gematria.engine import Engine
from gematria.models import outcome_to_dict
from gematria.normalize import is_repdigit

app = Flask(__name__)
_engine: Engine | None = None


def _require_engine() -> Engine:
    if _engine is None or _engine.index is None:
        raise RuntimeError("word list not loaded")
    return _engine


@app.errorhandler(ValueError)
def _bad_request(exc: ValueError):
    return jsonify({"error": str(exc)}), 400


@app.errorhandler(RuntimeError)
def _not_ready(exc: RuntimeError):
    return jsonify({"error": "please wait for data to load", "detail": str(exc)}), 503


# ---------- API ----------
@app.get("/health")
def health():
    ready = _engine is not None and _engine.index is not None
    return jsonify({"ok": True, "ready": ready, "words": len(_engine.index) if ready else 0})


@app.get("/api/weigh")
def api_weigh():
    q = request.args.get("q", "", type=str)
    eng = _engine or Engine()
    return jsonify({
        "input": q,
        "weights": {
            name: {"total": w.total, "repdigit": is_repdigit(w.total),
                   "breakdown": [[ch, v] for ch, v in w.breakdown]}
            for name, w in eng.weigh(q).items()
        },
    })


@app.get("/api/search")
def api_search():
    eng = _require_engine()
    targets = {}
    for s in eng.schemes:
        raw = request.args.get(s.name)
        if raw not in (None, ""):
            try:
                targets[s.name] = int(raw)
            except ValueError:
                raise ValueError(f"{s.name} must be an integer, got {raw!r}") from None
    if not targets:
        raise ValueError(f"give at least one target: {[s.name for s in eng.schemes]}")
    attempts = request.args.get("attempts", CFG.MAX_ATTEMPTS, type=int)
    timeout_ms = request.args.get("timeout_ms", CFG.TIMEOUT_MS, type=int)
    outcome = eng.generate(targets, max_attempts=attempts, timeout_ms=timeout_ms)
    return jsonify(outcome_to_dict(outcome, eng.schemes))


@app.get("/api/anagram")
def api_anagram():
    eng = _require_engine()
    letters = request.args.get("letters", "", type=str)
    attempts = request.args.get("attempts", CFG.ANAGRAM_ATTEMPTS, type=int)
    return jsonify(outcome_to_dict(eng.decompose(letters, max_attempts=attempts)))


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the gematria JSON API")
    ap.add_argument("--roots", nargs="+", default=[], help="Word-list files or folders (default: built-in list)")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.build(roots=args.roots, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
