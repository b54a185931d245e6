#!/usr/bin/env python3
"""Extrai registros normalizados de uma página YouTube salva em disco.

Uso:
    python scripts/extract_youtube_page.py pagina.html --kind posts
    python scripts/extract_youtube_page.py initial_data.json --kind channel --skip-invalid

Aceita HTML (com `var ytInitialData = ...;</script>`) ou o JSON da árvore
já extraído. Não faz requisições: baixar a página é responsabilidade de
quem chama.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from api.normalizers.youtube import (
    extract_channel_info,
    extract_community_posts,
    extract_grid_video_renderers,
    extract_player_info,
    extract_reel_item_renderers,
)
from config.logging import configure_logging_from_settings, extraction_context
from config.settings import get_runtime_settings, get_youtube_settings
from utils.errors import YouTubeExtractionError

KINDS = ("channel", "posts", "grid", "reels", "player")


def load_source(path: Path) -> str | dict[str, Any]:
    """HTML vira str; arquivos .json viram a árvore já parseada."""
    text = path.read_text(encoding="utf-8")
    if path.suffix == ".json":
        return json.loads(text)
    return text


def run(kind: str, source: str | dict[str, Any], *, skip_invalid: bool) -> Any:
    """Executa o extrator escolhido e devolve estrutura JSON-compatível."""
    settings = get_youtube_settings()
    if kind == "channel":
        return extract_channel_info(source, settings).to_dict()
    if kind == "player":
        return extract_player_info(source, settings).to_dict()

    extractors = {
        "posts": extract_community_posts,
        "grid": extract_grid_video_renderers,
        "reels": extract_reel_item_renderers,
    }
    records = extractors[kind](source, skip_invalid=skip_invalid or None, settings=settings)
    return [record.to_dict() for record in records]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("path", type=Path, help="Arquivo HTML ou JSON salvo.")
    parser.add_argument(
        "--kind",
        choices=KINDS,
        default="posts",
        help="Tipo de registro a extrair (padrao: posts).",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Descarta renderers desconhecidos em vez de falhar.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging_from_settings(get_runtime_settings())

    try:
        with extraction_context(args.path.name):
            result = run(args.kind, load_source(args.path), skip_invalid=args.skip_invalid)
    except YouTubeExtractionError as exc:
        print(f"[erro] {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
