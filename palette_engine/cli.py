import argparse
import json
import logging
import os

from .convert import (
    canonical_to_rayso,
    canonical_to_shadcn,
    rayso_to_canonical,
    rayso_to_shadcn,
    shadcn_to_canonical,
    tweakcn_to_canonical,
    tweakcn_to_rayso,
)
from .export import export_json, generate_readability_report, print_palette, print_ramp
from .overrides import collect_overrides
from .providers import PROVIDERS, export_provider
from .providers.terminal import theme_slug
from .providers.zed import generate_zed_themes
from .ramp import MODES, derive_neutral_ramp, generate_ramp
from .theme import (
    load_theme_from_json,
    theme_from_image,
    theme_from_seeds,
    validate_theme,
)

# (from, to) -> converter
CONVERSIONS = {
    ("shadcn", "canonical"): shadcn_to_canonical,
    ("tweakcn", "canonical"): tweakcn_to_canonical,
    ("tweakcn", "rayso"): tweakcn_to_rayso,
    ("rayso", "shadcn"): rayso_to_shadcn,
    ("rayso", "canonical"): rayso_to_canonical,
    ("canonical", "shadcn"): canonical_to_shadcn,
    ("canonical", "rayso"): canonical_to_rayso,
}

FORMATS = ("canonical", "shadcn", "tweakcn", "rayso")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="palette-engine",
        description="Generate perceptual color ramps and export themes to design tokens, editors and terminals",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log ramp anchoring decisions and fallbacks",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ramp = subparsers.add_parser("ramp", help="Generate a ramp from a seed color")
    ramp.add_argument("seed", help="Seed color (hex, rgb(), hsl(), oklch(), ...)")
    ramp.add_argument(
        "--stops",
        type=int,
        default=11,
        help="Number of stops, 1-11 (default: 11)",
    )
    ramp.add_argument(
        "--contrast-shift",
        type=float,
        default=0.0,
        help="Expand (>0) or compress (<0) the ramp's contrast, -1.0 to 1.0",
    )
    ramp.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Also print the neutral tones derived for this mode",
    )
    ramp.add_argument("--output", "-o", metavar="FILE", help="Write the ramp as JSON")

    seeds = subparsers.add_parser("seeds", help="Build a canonical theme from seed colors")
    seeds.add_argument("neutral", help="Neutral seed color")
    seeds.add_argument("primary", help="Primary seed color")
    seeds.add_argument("--secondary", help="Secondary seed color")
    seeds.add_argument("--accent", action="append", default=[], help="Accent seed (repeatable, up to 3)")
    seeds.add_argument("--name", default="Palette Engine", help="Theme name")
    seeds.add_argument("--output", "-o", metavar="FILE", required=True, help="Theme JSON path")

    image = subparsers.add_parser("image", help="Build a canonical theme from an image")
    image.add_argument("image_path", help="Path to the source image")
    image.add_argument(
        "--output", "-o",
        metavar="DIR",
        default=None,
        help="Output directory (default: same as input file)",
    )
    image.add_argument("--name", help="Theme name (default: derived from the image's colors)")
    image.add_argument(
        "--colors",
        type=int,
        default=20,
        help="Number of k-means clusters (default: 20)",
    )

    export = subparsers.add_parser("export", help="Export a canonical theme JSON to a provider")
    export.add_argument("theme", help="Canonical theme JSON file")
    export.add_argument(
        "--provider", "-p",
        choices=sorted(PROVIDERS),
        action="append",
        help="Provider to export (repeatable, default: all)",
    )
    export.add_argument("--output", "-o", metavar="DIR", default=None, help="Output directory")
    export.add_argument("--name", help="Theme name (default: the theme's name or file name)")
    export.add_argument(
        "--overrides",
        metavar="JSON",
        help="Theme record JSON holding stored overrides",
    )

    convert = subparsers.add_parser("convert", help="Convert between theme formats")
    convert.add_argument("input", help="Input theme JSON with light and dark blocks")
    convert.add_argument("--from", dest="source", choices=FORMATS, required=True)
    convert.add_argument("--to", dest="target", choices=FORMATS, required=True)
    convert.add_argument("--output", "-o", metavar="FILE", help="Output JSON (default: stdout)")

    report = subparsers.add_parser("report", help="Print a readability report for a theme")
    report.add_argument("theme", help="Canonical theme JSON file")
    report.add_argument("--mode", choices=MODES, action="append", help="Mode to check (default: both)")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "ramp": _run_ramp,
        "seeds": _run_seeds,
        "image": _run_image,
        "export": _run_export,
        "convert": _run_convert,
        "report": _run_report,
    }
    try:
        commands[args.command](args)
    except ValueError as exc:
        parser.error(str(exc))


def _run_ramp(args):
    """Print (and optionally save) a ramp for one seed."""
    ramp = generate_ramp(args.seed, stops=args.stops, contrast_shift=args.contrast_shift)
    print_ramp(ramp, args.seed)

    if args.mode:
        print(f"\nNeutral tones ({args.mode}):")
        for key, value in derive_neutral_ramp(args.seed, args.mode).items():
            print(f"  {key:6} {value}")

    if args.output:
        data = [
            {
                "label": stop.label,
                "hex": stop.hex,
                "luminance": round(stop.luminance, 4),
                "contrast": {
                    "white": round(stop.contrast.white, 2),
                    "black": round(stop.contrast.black, 2),
                },
                "accessibility": stop.accessibility._asdict(),
            }
            for stop in ramp
        ]
        with open(args.output, "w") as f:
            json.dump(data, f, indent=2)
        print(f"\nExported: {args.output}")


def _run_seeds(args):
    theme = theme_from_seeds(args.neutral, args.primary, args.secondary, args.accent[:3])
    theme["name"] = args.name
    for mode in MODES:
        print_palette(theme, mode)
    export_json(theme, args.output, theme_name=args.name)
    print(f"\nExported: {args.output}")


def _run_image(args):
    """Generate a canonical theme and its reports from an image file."""
    image_path = args.image_path
    output_dir = args.output or os.path.dirname(image_path) or "."
    os.makedirs(output_dir, exist_ok=True)

    print(f"Analyzing: {image_path}")
    theme, swatches = theme_from_image(image_path, n_colors=args.colors)
    theme_name = args.name or theme["name"]
    theme["name"] = theme_name
    print(f"Extracted {len(swatches)} colors, theme name: {theme_name}")

    exported = []
    for mode in MODES:
        print_palette(theme, mode)
        report, _ = generate_readability_report(theme, mode)
        print("\n" + report)
        report_path = os.path.join(output_dir, f"readability_report-{mode}.txt")
        with open(report_path, "w") as f:
            f.write(report)
        exported.append(report_path)

    theme_path = os.path.join(output_dir, f"{theme_slug(theme_name)}.json")
    export_json(
        theme,
        theme_path,
        source_file=os.path.basename(image_path),
        theme_name=theme_name,
    )
    exported.insert(0, theme_path)

    zed_path = os.path.join(output_dir, f"{theme_slug(theme_name)}-zed.json")
    with open(zed_path, "w") as f:
        f.write(generate_zed_themes(theme, theme_name))
    exported.append(f"{zed_path} (contains '{theme_name} Dark' and '{theme_name} Light')")

    _print_exported(exported)


def _run_export(args):
    """Write one file per provider for a canonical theme JSON."""
    theme, _ = load_theme_from_json(args.theme)
    theme_name = args.name or theme.get("name") or os.path.splitext(os.path.basename(args.theme))[0]
    output_dir = args.output or os.path.dirname(args.theme) or "."
    os.makedirs(output_dir, exist_ok=True)

    overrides = {}
    if args.overrides:
        with open(args.overrides) as f:
            overrides = collect_overrides(json.load(f))

    exported = []
    for provider_id in args.provider or PROVIDERS:
        output = export_provider(provider_id, theme, overrides.get(provider_id), name=theme_name)
        path = os.path.join(output_dir, f"{provider_id}-{output.filename}")
        with open(path, "w") as f:
            f.write(output.content)
        exported.append(f"{path} ({PROVIDERS[provider_id].name})")

    _print_exported(exported)


def _run_convert(args):
    converter = CONVERSIONS.get((args.source, args.target))
    if converter is None:
        supported = ", ".join(f"{a}->{b}" for a, b in CONVERSIONS)
        raise ValueError(f"Cannot convert {args.source} to {args.target} (supported: {supported})")

    with open(args.input) as f:
        data = json.load(f)
    if args.source == "canonical":
        data = validate_theme({mode: data[mode] for mode in MODES if mode in data})

    converted = converter(data)
    text = json.dumps(converted, indent=2)
    if args.output:
        with open(args.output, "w") as f:
            f.write(text)
        print(f"Exported: {args.output}")
    else:
        print(text)


def _run_report(args):
    theme, _ = load_theme_from_json(args.theme)
    total = 0
    for mode in args.mode or MODES:
        report, issues = generate_readability_report(theme, mode)
        print(report)
        total += len(issues)
    if total:
        raise SystemExit(1)


def _print_exported(paths):
    print("\n" + "=" * 60)
    print("Exported:")
    for path in paths:
        print(f"  - {path}")
    print("=" * 60)


if __name__ == "__main__":
    main()
