#!/usr/bin/env python3
"""
Demo script for soda avatar.

Renders every shape/type combination for a few names into an HTML gallery
and shows the cache answering repeated requests.
"""

import sys
import time
from pathlib import Path

from soda_avatar import AvatarRequest, AvatarService, AvatarType, Shape, get_svg_data_url
from soda_avatar.repositories import InMemoryAvatarRepository

NAMES = ["Ada Lovelace", "Alan Turing", "Grace Hopper", "Zoe", "Linus"]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_gallery(output: Path) -> None:
    """Write an HTML page with every combination for each name."""
    print_section("Gallery")

    rows = []
    for name in NAMES:
        cells = []
        for shape in Shape:
            for avatar_type in AvatarType:
                url = get_svg_data_url(name, shape.value, avatar_type.value, 64)
                cells.append(f'<img src="{url}" title="{shape.value}/{avatar_type.value}">')
        rows.append(f"<div><h3>{name}</h3>{''.join(cells)}</div>")
        print(f"  ✓ Rendered: {name}")

    output.write_text(f"<!doctype html><html><body>{''.join(rows)}</body></html>", encoding="utf-8")
    print(f"\n📝 Wrote {output}")


def demo_cache() -> None:
    """Demonstrate cache hits on repeated requests."""
    print_section("Cache")

    service = AvatarService(repository=InMemoryAvatarRepository(max_entries=100))
    request = AvatarRequest(name="Ada Lovelace", shape="rounded", type="pattern", size=256)

    for attempt in range(3):
        start = time.perf_counter()
        service.get_svg(request)
        print(f"  Request {attempt + 1}: {(time.perf_counter() - start) * 1000:.3f} ms")

    stats = service.get_stats()
    print(f"\n  Hits: {stats['cache_hits']}  Misses: {stats['cache_misses']}")
    print(f"  Hit rate: {stats['hit_rate']:.0%}")


def main() -> None:
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("avatars.html")
    demo_gallery(output)
    demo_cache()


if __name__ == "__main__":
    main()
