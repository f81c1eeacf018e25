from __future__ import annotations

import argparse

from rich import print as rprint
from rich.markup import escape

from ogmeta.adapters.host.in_memory_hooks import InMemoryHookRegistry
from ogmeta.app.container import build_container
from ogmeta.config import LOG_LEVEL, configure_logging
from ogmeta.domain.schema import NONCE_ACTION, NONCE_FIELD
from ogmeta.settings import load_settings


def parse_pairs(pairs: list[str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise argparse.ArgumentTypeError(f"Expected key=value, got {pair!r}")
        out[key.strip()] = value
    return out


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Edit and render OpenGraph metadata for a post.")
    p.add_argument("--item", default="1", help="Content item id")
    p.add_argument("--post-type", default="post")
    p.add_argument("--settings", default=None, help="Path to settings.toml")
    p.add_argument("--set", dest="pairs", action="append", default=[], metavar="KEY=VALUE",
                   help="Submit a field value before rendering (repeatable)")
    p.add_argument("--form", action="store_true", help="Print the admin panel markup")
    p.add_argument("--log-level", default=None)
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level or LOG_LEVEL)

    settings = load_settings(args.settings) if args.settings else None
    c = build_container(settings)

    hooks = InMemoryHookRegistry()
    c.plugin.register(hooks)
    hooks.fire_admin_init()

    if args.pairs:
        submitted = parse_pairs(args.pairs)
        if c.nonces is not None:
            submitted[NONCE_FIELD] = c.nonces.create(NONCE_ACTION)
        hooks.fire_save(args.item, {"post_type": args.post_type}, submitted)
        rprint(f"[green]Submitted[/green] item {args.item}: {sorted(k for k in submitted if k != NONCE_FIELD)}")

    if args.form:
        rprint("\n[bold]=== ADMIN PANEL ===[/bold]\n")
        for markup in hooks.render_panels(args.item, args.post_type):
            rprint(escape(markup))

    rprint("\n[bold]=== HEAD ===[/bold]\n")
    head = hooks.fire_head({"single": True, "item_id": args.item})
    rprint(escape(head) if head else "[dim](no OpenGraph tags)[/dim]")


if __name__ == "__main__":
    main()
