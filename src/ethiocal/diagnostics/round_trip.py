from __future__ import annotations

import argparse
import random
from datetime import datetime, timedelta

import ethiocal
from ethiocal import EthiopianDateTime


def random_ethiopian(rng: random.Random, start_year: int, end_year: int) -> EthiopianDateTime:
    Y = rng.randint(start_year, end_year)
    M = rng.randint(1, 13)
    D = rng.randint(1, ethiocal.days_in_month(Y, M))
    return EthiopianDateTime(Y, M, D, rng.randint(0, 23), rng.randint(0, 59), rng.randint(0, 59))


def random_instant(rng: random.Random, start_year: int, end_year: int) -> datetime:
    start = ethiocal.to_gregorian_instant(ethiocal.EthiopianDate(start_year, 1, 1))
    end = ethiocal.to_gregorian_instant(ethiocal.EthiopianDate(end_year + 1, 1, 1))
    span = int((end - start).total_seconds())
    return start + timedelta(seconds=rng.randint(0, span - 1))


def roundtrip_test(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> int:
    rng = random.Random(seed)
    failures = 0

    for _ in range(N):
        e0 = random_ethiopian(rng, start_year, end_year)
        t = ethiocal.to_gregorian_instant(e0)
        back = ethiocal.to_ethiopian_datetime(t)
        if back != e0:
            failures += 1
            print("\nFAIL (ethiopian -> utc -> ethiopian)")
            print("e0:  ", e0)
            print("utc: ", t.isoformat())
            print("back:", back)
            if failures >= max_failures:
                return failures

        t0 = random_instant(rng, start_year, end_year)
        back_t = ethiocal.to_gregorian_instant(ethiocal.to_ethiopian_datetime(t0))
        if back_t != t0:
            failures += 1
            print("\nFAIL (utc -> ethiopian -> utc)")
            print("t0:  ", t0.isoformat())
            print("back:", back_t.isoformat())
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: ethiopian <-> UTC instant.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start-year", type=int, default=1, help="First EC year.")
    p.add_argument("--end-year", type=int, default=9990, help="Last EC year.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    print(f"Testing EC {args.start_year}..{args.end_year} ...")
    failures = roundtrip_test(
        args.N, args.start_year, args.end_year, args.seed, max_failures=args.max_failures
    )
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
