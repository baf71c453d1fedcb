from __future__ import annotations

import argparse
import json
from pathlib import Path

from ferrite.testing import generate_malformed_documents


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=90)
    ap.add_argument("--out", default="tests/fixtures/malformed_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    manifest: dict[str, str] = {}
    for case in generate_malformed_documents(seed=args.seed, count=args.count):
        (out_dir / case.name).write_text(case.source, encoding="utf-8")
        manifest[case.name] = case.expected.value
    (out_dir / "expected.json").write_text(json.dumps(manifest, indent=2, sort_keys=True) + "\n", encoding="utf-8")

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
