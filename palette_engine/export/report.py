from ..color import contrast_between, to_oklch

# Contrast requirements
MIN_TEXT_CONTRAST = 4.5  # tx and tx_2 against bg AND bg_2
MIN_FAINT_CONTRAST = 3.0  # Comments, placeholders
MIN_ACCENT_CONTRAST = 3.0

REPORT_CATEGORIES = (
    ("TEXT", ("tx", "tx_2"), MIN_TEXT_CONTRAST),
    ("FAINT TEXT", ("tx_3",), MIN_FAINT_CONTRAST),
    ("ACCENTS", ("pr", "sc", "ac_1", "ac_2", "ac_3"), MIN_ACCENT_CONTRAST),
)

PRINT_CATEGORIES = (
    ("BACKGROUNDS", ("bg", "bg_2")),
    ("INTERFACE", ("ui", "ui_2", "ui_3")),
    ("TEXT", ("tx", "tx_2", "tx_3")),
    ("ACCENTS", ("pr", "sc", "ac_1", "ac_2", "ac_3")),
)


def generate_readability_report(theme, mode):
    """Generate a readability report for one mode of a canonical theme.

    Returns:
        tuple: (report text, list of (key, hex, achieved, required) issues)
    """
    block = theme[mode]
    bg = block["bg"]
    bg_2 = block["bg_2"]

    report = []
    report.append("=" * 70)
    report.append("READABILITY REPORT")
    report.append("=" * 70)
    report.append(f"Theme: {mode.upper()}")
    report.append(f"Background:           {bg} (L: {to_oklch(bg).l:.3f})")
    report.append(f"Background Secondary: {bg_2} (L: {to_oklch(bg_2).l:.3f})")
    report.append("")

    issues = []

    for cat_name, keys, min_contrast in REPORT_CATEGORIES:
        report.append(f"\n{cat_name} (min: {min_contrast}:1)")
        report.append("-" * 50)
        for key in keys:
            if key not in block:
                continue
            color = block[key]
            cr_bg = contrast_between(color, bg)
            cr_bg_2 = contrast_between(color, bg_2)
            min_cr = min(cr_bg, cr_bg_2)

            status = "✓" if min_cr >= min_contrast else "✗ FAIL"
            if min_cr < min_contrast:
                issues.append((key, color, min_cr, min_contrast))

            report.append(
                f"  {key:6} {color}  vs bg: {cr_bg:4.1f}:1  vs bg_2: {cr_bg_2:4.1f}:1  {status}"
            )

    report.append("\n" + "=" * 70)
    if issues:
        report.append(f"ISSUES FOUND: {len(issues)}")
        for key, hex_val, achieved, required in issues:
            report.append(f"  - {key}: {hex_val} has {achieved:.1f}:1, needs {required}:1")
    else:
        report.append("ALL COLORS PASS CONTRAST REQUIREMENTS ✓")
    report.append("=" * 70)

    return "\n".join(report), issues


def ramp_report(ramp):
    """Accessibility table for a ramp, one line per stop."""
    lines = [f"{'stop':>5}  {'hex':7}  {'lum':>6}  {'white':>5}  {'black':>5}  level"]
    for stop in ramp:
        lines.append(
            f"{stop.label:>5}  {stop.hex}  {stop.luminance:6.4f}  "
            f"{stop.contrast.white:5.2f}  {stop.contrast.black:5.2f}  {stop.accessibility.level}"
        )
    return "\n".join(lines)


def print_palette(theme, mode):
    """Print one mode of a canonical theme"""
    block = theme[mode]
    bg = block["bg"]

    print("\n" + "=" * 60)
    print(f"CANONICAL THEME ({mode.upper()})")
    print("=" * 60)

    for cat_name, keys in PRINT_CATEGORIES:
        print(f"\n{cat_name}:")
        for key in keys:
            if key in block:
                contrast = contrast_between(block[key], bg)
                print(f"  {key:6} {block[key]}  (contrast: {contrast:.1f}:1)")


def print_ramp(ramp, seed=None):
    print("\n" + "=" * 60)
    print(f"RAMP{f' FROM {seed}' if seed else ''} ({len(ramp)} stops)")
    print("=" * 60)
    print(ramp_report(ramp))
