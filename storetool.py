# storetool.py
import argparse
import json
import sys
from pathlib import Path

from src.storeeditor.codec import decode, parse_json
from src.storeeditor.config import DB_PATH, JSON_INDENT
from src.storeeditor.errors import DecodeError
from src.storeeditor.store import SqliteStore
from src.storeeditor.transfer import dump_store, load_dump


def _build_parser():
    p = argparse.ArgumentParser(prog="storetool", description="Inspect and edit the Store Editor database.")
    p.add_argument("--db", default=str(DB_PATH), help="SQLite database file (default: %(default)s)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("list", help="list keys")

    g = sub.add_parser("get", help="print the value of a key")
    g.add_argument("key")

    s = sub.add_parser("set", help="store a JSON value under a key")
    s.add_argument("key")
    s.add_argument("value", help="JSON text")

    r = sub.add_parser("remove", help="remove a key")
    r.add_argument("key")

    d = sub.add_parser("dump", help="write every key to a JSON file")
    d.add_argument("file")

    l = sub.add_parser("load", help="load keys from a JSON file")
    l.add_argument("file")
    l.add_argument("--replace", action="store_true", help="remove keys missing from the file")
    return p


def main(argv=None):
    args = _build_parser().parse_args(argv)
    store = SqliteStore(args.db)

    if args.cmd == "list":
        for key in store.list_keys():
            print(key)
        return 0

    if args.cmd == "get":
        raw = store.get(args.key)
        if raw is None:
            print(f"[storetool] no such key: {args.key}", file=sys.stderr)
            return 1
        try:
            print(json.dumps(parse_json(raw), ensure_ascii=False, indent=JSON_INDENT))
        except DecodeError:
            print(raw)
        return 0

    if args.cmd == "set":
        try:
            decode(args.value, key=args.key)
        except DecodeError as e:
            print(f"[storetool] {e}", file=sys.stderr)
            return 2
        store.set(args.key, args.value)
        print(f"[storetool] set {args.key}")
        return 0

    if args.cmd == "remove":
        store.remove(args.key)
        print(f"[storetool] removed {args.key}")
        return 0

    if args.cmd == "dump":
        data = dump_store(store)
        Path(args.file).write_text(json.dumps(data, ensure_ascii=False, indent=JSON_INDENT), encoding="utf-8")
        print(f"[storetool] dumped {len(data)} key(s) to {args.file}")
        return 0

    if args.cmd == "load":
        try:
            data = parse_json(Path(args.file).read_text(encoding="utf-8"))
            n = load_dump(store, data, replace=args.replace)
        except (OSError, ValueError) as e:
            print(f"[storetool] failed to load {args.file}: {e}", file=sys.stderr)
            return 2
        print(f"[storetool] loaded {n} key(s) from {args.file}")
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
