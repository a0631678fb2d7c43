"""
verify.py
Independent check of a revealed commitment: fair-dice-verify KEY_HEX VALUE DIGEST.
"""

import argparse
import sys
from typing import List, Optional

from fair_dice.core.config import GameConfig
from fair_dice.fairness.commitment import CommitmentScheme


def main(argv: Optional[List[str]] = None) -> int:
    cfg = GameConfig()
    parser = argparse.ArgumentParser(description="Verify that a revealed number and key match a published HMAC")
    parser.add_argument('key', type=str, help='Revealed key (hex)')
    parser.add_argument('value', type=int, help='Revealed number')
    parser.add_argument('digest', type=str, help='HMAC published before your answer (hex)')
    parser.add_argument('--hash', type=str, default=cfg.hash_name, help='HMAC hash algorithm')
    args = parser.parse_args(argv)

    try:
        key = bytes.fromhex(args.key)
    except ValueError:
        print(f"Invalid key: {args.key!r} is not hex.", file=sys.stderr)
        return 1
    try:
        scheme = CommitmentScheme(hash_name=args.hash)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    if scheme.verify(key, args.value, args.digest):
        print("OK: the revealed number matches the published HMAC.")
        return 0
    print("MISMATCH: the revealed number and key do not produce the published HMAC.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
