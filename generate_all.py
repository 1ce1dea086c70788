#!/usr/bin/env python3
"""
Generate all themes from images and canonical theme JSON files.
Consolidates provider exports into out/exports/ folder.
"""

import argparse
import re
import shutil
import subprocess
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(
        description="Generate all themes from images and canonical theme JSON files"
    )
    parser.add_argument(
        "--provider",
        action="append",
        default=None,
        help="Only export these providers (repeatable, default: all)",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    images_dir = root / "images"
    themes_dir = root / "themes"
    out_dir = root / "out"
    exports_dir = out_dir / "exports"

    exports_dir.mkdir(parents=True, exist_ok=True)

    # Supported image extensions
    image_extensions = {".png", ".jpg", ".jpeg"}

    images = []
    if images_dir.exists():
        images = [f for f in images_dir.iterdir() if f.suffix.lower() in image_extensions]

    themes = []
    if themes_dir.exists():
        themes = [f for f in themes_dir.iterdir() if f.suffix.lower() == ".json"]

    if not images and not themes:
        print(f"No images in {images_dir} or themes in {themes_dir}")
        return

    print(f"Found {len(images)} images and {len(themes)} themes to process\n")

    # Images first produce a canonical theme JSON, which is then exported
    for image_path in sorted(images):
        theme_name = image_path.stem
        theme_out_dir = out_dir / theme_name

        print(f"{'=' * 60}")
        print(f"Generating from image: {theme_name}")
        print(f"{'=' * 60}")

        cmd = [
            "palette-engine",
            "image",
            str(image_path),
            "-o",
            str(theme_out_dir),
            "--name",
            theme_name,
        ]
        if subprocess.run(cmd, cwd=root).returncode != 0:
            print(f"Error generating {theme_name}")
            continue

        themes.append(theme_out_dir / f"{_slug(theme_name)}.json")
        print()

    for theme_path in sorted(themes):
        theme_name = theme_path.stem
        theme_out_dir = out_dir / theme_name

        print(f"{'=' * 60}")
        print(f"Exporting theme: {theme_name}")
        print(f"{'=' * 60}")

        cmd = ["palette-engine", "export", str(theme_path), "-o", str(theme_out_dir)]
        for provider in args.provider or []:
            cmd.extend(["--provider", provider])

        if subprocess.run(cmd, cwd=root).returncode != 0:
            print(f"Error exporting {theme_name}")
            continue

        _copy_exports(theme_out_dir, exports_dir)
        print()

    print(f"{'=' * 60}")
    print("Done! All exports consolidated in:")
    print(f"  {exports_dir}")
    print(f"{'=' * 60}")


def _slug(name):
    return re.sub(r"[^a-z0-9]", "-", name.lower())


def _copy_exports(theme_out_dir, exports_dir):
    """Copy provider exports to the consolidated exports directory."""
    for path in sorted(theme_out_dir.iterdir()):
        if path.suffix in {".css", ".json", ".yml", ".conf", ".gpl"} and "-" in path.stem:
            shutil.copy(path, exports_dir / path.name)
            print(f"Copied {path.name} to {exports_dir}")


if __name__ == "__main__":
    main()
