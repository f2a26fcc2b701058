"""CLI entrypoint for inspecting and building CIDs."""

from __future__ import annotations

from argparse import ArgumentParser, Namespace
from collections.abc import Sequence
import sys

from cidcodec.cid import (
    CIDv0,
    CIDv1,
    CIDWithMultibase,
    from_text,
    from_v0,
    to_text,
)
from cidcodec.exceptions import (
    BaseCIDError,
    UnsupportedEncodingError,
)
from cidcodec.multiformats import (
    HashAlgorithm,
    Multibase,
    Multicodec,
)

_MULTIBASE_NAMES = [encoding.encoding_name for encoding in Multibase]
_CODEC_NAMES = [codec.codec_name for codec in Multicodec]
_HASH_NAMES = [algorithm.hash_name for algorithm in HashAlgorithm]


def build_parser() -> ArgumentParser:
    """Build CLI parser."""
    parser = ArgumentParser(
        prog="cid-tool", description="Inspect, convert and build CIDs"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_parser = subparsers.add_parser("inspect", help="Describe a CID")
    inspect_parser.add_argument("cid", help="CID text (CIDv0 or multibase CIDv1)")

    upgrade_parser = subparsers.add_parser(
        "upgrade", help="Print the CIDv1 equivalent of a CIDv0"
    )
    upgrade_parser.add_argument("cid", help="CIDv0 text")
    upgrade_parser.add_argument(
        "--multibase",
        choices=_MULTIBASE_NAMES,
        default="base32",
        help="Text encoding of the output",
    )

    convert_parser = subparsers.add_parser(
        "convert", help="Re-encode a CIDv1 in another multibase"
    )
    convert_parser.add_argument("cid", help="CIDv1 text")
    convert_parser.add_argument(
        "--multibase", choices=_MULTIBASE_NAMES, required=True
    )

    encode_parser = subparsers.add_parser(
        "encode", help="Build a CID from a pre-computed digest"
    )
    encode_parser.add_argument("--codec", choices=_CODEC_NAMES, default="dag-pb")
    encode_parser.add_argument("--hash", choices=_HASH_NAMES, default="sha2-256")
    encode_parser.add_argument("--digest", required=True, help="Digest as hex")
    encode_parser.add_argument("--version", type=int, choices=[0, 1], default=1)
    encode_parser.add_argument("--multibase", choices=_MULTIBASE_NAMES)
    return parser


def _describe(decoded: CIDWithMultibase) -> list[str]:
    cid = decoded.cid
    multibase = decoded.multibase or Multibase.BASE58BTC
    return [
        f"version: {cid.version}",
        f"multibase: {multibase}",
        f"codec: {cid.codec}",
        f"hash: {cid.hash_algorithm}",
        f"digest length: {len(cid.digest)}",
        f"digest: {cid.digest.hex()}",
    ]


def _run(args: Namespace) -> list[str]:
    if args.command == "inspect":
        return _describe(from_text(args.cid))

    if args.command == "upgrade":
        cid = from_text(args.cid).cid
        if not isinstance(cid, CIDv0):
            raise UnsupportedEncodingError("upgrade expects a CIDv0")
        return [to_text(from_v0(cid), Multibase.from_name(args.multibase))]

    if args.command == "convert":
        cid = from_text(args.cid).cid
        if not isinstance(cid, CIDv1):
            raise UnsupportedEncodingError(
                "CIDv0 has no multibase; use 'upgrade' first"
            )
        return [to_text(cid, Multibase.from_name(args.multibase))]

    try:
        digest = bytes.fromhex(args.digest)
    except ValueError as e:
        raise UnsupportedEncodingError(f"digest is not hex: {e}") from e
    multibase = Multibase.from_name(args.multibase) if args.multibase else None
    built: CIDv0 | CIDv1
    if args.version == 0:
        if args.codec != "dag-pb" or args.hash != "sha2-256":
            raise UnsupportedEncodingError("CIDv0 is always dag-pb with sha2-256")
        built = CIDv0(digest)
    else:
        built = CIDv1(
            codec=Multicodec.from_name(args.codec),
            hash_algorithm=HashAlgorithm.from_name(args.hash),
            digest=digest,
        )
    return [to_text(built, multibase)]


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI and return process status code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        lines = _run(args)
    except BaseCIDError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
