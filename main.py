#!/usr/bin/env python3
import logging
from rational import Rational, RationalError, div_by

LOG = logging.getLogger("rational.demo")


def scenarios():
    half = div_by(1, 2)
    third = div_by(1, 3)
    two_thirds = div_by(2, 3)
    yield "1/2 + 1/3 == 5/6", lambda: half + third == div_by(5, 6)
    yield "1/2 - 1/3 == 1/6", lambda: half - third == div_by(1, 6)
    yield "1/2 * 1/3 == 1/6", lambda: half * third == div_by(1, 6)
    yield "1/2 / 1/3 == 3/2", lambda: half / third == div_by(3, 2)
    yield "-(1/2) == -1/2", lambda: -half == div_by(-1, 2)
    yield "str(2/1) == '2'", lambda: str(div_by(2, 1)) == "2"
    yield "str(-2/4) == '-1/2'", lambda: str(div_by(-2, 4)) == "-1/2"
    yield "parse('117/1098') == 13/122", lambda: str(Rational.parse("117/1098")) == "13/122"
    yield "1/2 < 2/3", lambda: half < two_thirds
    yield "1/2 in 1/3..2/3", lambda: half in third.range_to(two_thirds)
    yield "2000000000/4000000000 == 1/2", lambda: div_by(2000000000, 4000000000) == half
    yield "39-digit pair == 1/2", lambda: div_by(
        912016490186296920119201192141970416029,
        1824032980372593840238402384283940832058,
    ) == half


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    ok = True
    for name, check in scenarios():
        try:
            result = check()
        except RationalError as e:
            LOG.error("%s: %s", name, e)
            ok = False
            continue
        print(f"{name}: {result}")
        ok = ok and result
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
