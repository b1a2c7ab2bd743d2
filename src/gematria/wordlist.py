"""Curated built-in corpus, used when no external word list is supplied."""
from __future__ import annotations

_BUILTIN = """
the be to of and in that have it for not on with he as you do at
this but his by from they we say her she or an will my one all would
there their what so up out if about who get which go me when make can
like time no just him know take people into year your good some could them
see other than then now look only come its over think also back after use
two how our work first well way even new want because any these give day
most us is was are been has had were said did having may should could
man woman child baby boy girl person people family friend father mother brother
sister son daughter husband wife king queen prince lord lady angel god devil
house home room door window wall floor roof building castle palace temple church
school hospital hotel store shop market office bank library museum theater park
garden farm field forest wood tree flower grass plant seed root leaf branch
mountain hill valley river lake ocean sea water island beach shore wave storm
cloud rain snow ice wind fire smoke earth stone rock sand dust mud clay
sun moon star planet sky heaven space world land ground soil path road street
city town village country nation state place area region zone border edge corner
hand finger arm leg foot toe head face eye ear nose mouth tooth tongue lip
neck shoulder chest back heart blood bone skin hair brain mind body soul spirit
life death birth age youth health disease pain love hate fear hope faith trust
joy sorrow anger peace war battle fight victory defeat power force strength weakness
book page word letter name number line text story tale poem song music art
picture image color sound voice noise silence light dark shadow bright clear dim
car truck bus train plane ship boat bike horse dog cat bird fish animal beast
lion tiger bear wolf fox deer rabbit mouse rat snake dragon eagle hawk dove
crow owl swan duck goose chicken rooster pig cow sheep goat elephant monkey
food bread meat fish fruit apple orange grape lemon berry nut rice wheat corn
milk water wine beer coffee tea juice oil salt sugar honey butter cheese egg
gold silver copper iron steel metal wood paper glass plastic cloth silk wool
diamond pearl ruby crystal jewel crown ring chain sword knife gun weapon shield
armor helmet flag banner sign symbol mark cross circle square triangle star shape
run walk stand sit lie sleep wake eat drink talk speak tell ask answer call
cry laugh smile sing dance play work rest wait stay leave arrive enter exit
open close start stop begin end finish continue break fix build destroy create
make do act move turn push pull lift carry hold drop throw catch hit kick
cut burn freeze melt boil cook wash clean dirty hide show see look watch
hear listen touch feel smell taste think know understand remember forget learn
teach read write draw paint believe doubt want need like love hate prefer
choose decide try attempt succeed fail win lose fight defend attack protect save
help hurt heal kill die live exist happen occur appear disappear vanish remain
change grow shrink increase decrease rise fall climb descend fly swim dive jump
good bad great small big large little tiny huge giant long short tall high
low deep shallow wide narrow thick thin fat heavy light hard soft smooth rough
hot cold warm cool wet dry clean dirty new old young ancient modern fresh
stale raw ripe rotten sweet sour bitter salty spicy mild strong weak powerful
fast slow quick swift rapid gradual sudden sharp dull bright dark light pale
vivid clear cloudy foggy sunny rainy snowy windy stormy calm quiet loud noisy
silent beautiful ugly pretty handsome plain elegant simple complex easy difficult
hard soft gentle rough smooth safe dangerous risky secure stable steady shaky
true false real fake genuine artificial natural wild tame free bound open closed
full empty complete incomplete whole broken perfect imperfect right wrong correct
happy sad joyful sorrowful glad angry mad furious calm peaceful nervous anxious
scared afraid brave bold shy proud humble kind cruel mean nice friendly hostile
rich poor wealthy noble common rare usual strange odd normal weird crazy sane
wise foolish smart stupid clever dumb bright dull sharp blunt alive dead living
truth lie fact fiction reality dream vision thought idea concept theory law rule
order chaos harmony discord balance unity division whole part piece fragment unity
justice mercy grace blessing curse luck fate destiny chance fortune miracle magic
mystery secret wisdom knowledge ignorance truth prophecy vision revelation sacred holy
divine mortal eternal infinite finite alpha omega beginning end origin source root
essence nature being existence void nothing something everything universe cosmos realm
dimension plane sphere circle cycle wheel spiral path way road journey quest
mission purpose meaning sense reason cause effect result consequence outcome end
goal aim target object subject matter substance form structure pattern design plan
scheme system method process procedure ritual ceremony rite custom tradition culture
"""


def builtin_words() -> list[str]:
    """De-duplicated in first-seen order."""
    seen: set[str] = set()
    out: list[str] = []
    for w in _BUILTIN.split():
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
