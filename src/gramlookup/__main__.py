from __future__ import annotations
import argparse, json
from .engine import Engine
from .config import TOP_K, MIN_MATCH_SCORE

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Fuzzy lookup CLI (Engine-backed)")
    p.add_argument("--roots", nargs="+", default=[], help="Folders to scan for .txt (one entry per line)")
    p.add_argument("--entries", nargs="+", default=[], help="Extra entries to index")
    p.add_argument("-k", type=int, default=TOP_K, help="Top-K results")
    p.add_argument("--min-score", type=float, default=MIN_MATCH_SCORE, help="Minimum match score")
    p.add_argument("--no-levenshtein", action="store_true", help="Rank by gram cosine only")
    p.add_argument("--gram-lower", type=int, default=None, help="Smallest gram size")
    p.add_argument("--gram-upper", type=int, default=None, help="Largest gram size")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if not args.roots and not args.entries:
        p.error("one of --roots or --entries is required")

    eng = Engine()
    try:
        try:
            eng.build(
                roots=args.roots,
                entries=args.entries,
                use_levenshtein=not args.no_levenshtein,
                gram_size_lower=args.gram_lower,
                gram_size_upper=args.gram_upper,
                verbose=args.verbose,
            )
        except ValueError as exc:
            p.error(str(exc))

        def run_query(q: str):
            rows = eng.lookup(q, top_k=args.k, min_match_score=args.min_score)
            if args.json:
                print(json.dumps([r.as_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                if not rows:
                    print("(no matches)"); return
                print("#  Score   Source                               Value")
                for r in rows:
                    print(f"{r.rank:<2} {r.score:<7.4f} {r.source_text:<36} {r.value}")

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print(f"{eng.size():,} entries indexed. Type a query (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
