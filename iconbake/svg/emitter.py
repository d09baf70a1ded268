"""Write C source for flattened icons.

Each icon becomes one translation unit exposing

    bool <prefix><name>(vg_shape_t **out, size_t *count);

which allocates the shapes the caller then owns. Coordinates are quantized
to int16 here; the engine only ever produces floats.
"""

from __future__ import annotations

import math

from iconbake.engine.context import Subpath

INT16_MIN = -32768
INT16_MAX = 32767


def clamp16(value: float) -> int:
    """Round half away from zero and clamp to the int16 range."""
    if value > INT16_MAX:
        return INT16_MAX
    if value < INT16_MIN:
        return INT16_MIN
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def sanitize_ident(name: str) -> str:
    """Make a C identifier fragment from a file stem."""
    out: list[str] = []
    for i, ch in enumerate(name):
        if ch.isascii() and (ch.isalpha() or ch == "_" or (i > 0 and ch.isdigit())):
            out.append(ch)
        elif ch in "- .":
            out.append("_")
    return "".join(out) or "icon"


def _point_array(sym: str, index: int, sp: Subpath) -> list[str]:
    lines = [f"static const pix_point_t {sym}_p{index}[] = {{"]
    for x, y in sp.points:
        lines.append(f"  {{ {clamp16(x)}, {clamp16(y)} }},")
    lines.append("};")
    return lines


def auto_group(prefix: str, group: bool) -> bool:
    """Filled icon sets (prefix containing ``_f_``) are always grouped."""
    return group or "_f_" in prefix


def emit_c(
    name: str,
    prefix: str,
    subpaths: list[Subpath],
    width: int,
    height: int,
    warnings: list[str] | None = None,
    upscale: int = 1,
    group: bool = False,
) -> str:
    """Generate the C translation unit for one icon.

    Outline mode builds one shape per subpath. Group mode puts every subpath
    in a single shape separated by ``vg_path_break`` (filled icons with holes).
    """
    sym = prefix + sanitize_ident(name)
    lines = [
        f"// Generated icon: {name} ({width}x{height})",
        f"// Upscale factor: {upscale}",
    ]
    if group:
        lines.append("// Grouped subpaths: yes (multiple SVG subpaths emitted as one vg_path_t with segment breaks)")
    for w in warnings or []:
        lines.append(f"// WARNING: {w}")
    lines += ["#include <vg/shape.h>", "#include <vg/primitives.h>", "#include <vg/vg.h>", ""]

    for i, sp in enumerate(subpaths):
        lines += _point_array(sym, i, sp)

    if group:
        reserve = len(subpaths[0].points) if subpaths else 4
        lines += [
            f"bool {sym}(vg_shape_t **out, size_t *count) {{",
            "  if(!out||!count) return false; *count=1;",
            "  out[0]=vg_shape_create(); if(!out[0]) return false;",
            f"  if(!vg_shape_path_clear(out[0], {reserve})) return false;",
            "  vg_path_t *p = vg_shape_path(out[0]); if(!p) return false;",
        ]
        for i, sp in enumerate(subpaths):
            lines.append(f"  // subpath {i}")
            if i > 0:
                lines.append(f"  if(!vg_path_break(p, {len(sp.points)})) return false;")
            lines.append(f"  for(int i=0;i<{len(sp.points)};++i){{ vg_path_append(p, &{sym}_p{i}[i], NULL); }}")
        lines += ["  return true;", "}"]
        return "\n".join(lines) + "\n"

    for i, sp in enumerate(subpaths):
        total = len(sp.points)
        lines += [
            f"static bool {sym}_build_{i}(vg_shape_t *s) {{",
            "  if(!s) return false;",
            f"  if(!vg_shape_path_clear(s, {total})) return false;",
            "  vg_path_t *p = vg_shape_path(s); if(!p) return false;",
            f"  for(int i=0;i<{total};++i){{ vg_path_append(p, &{sym}_p{i}[i], NULL); }}",
            "  return true;",
            "}",
        ]
    n = len(subpaths)
    lines += [
        f"bool {sym}(vg_shape_t **out, size_t *count) {{",
        f"  if(!out||!count) return false; *count={n};",
        f"  for(size_t i=0;i<{n};++i){{ out[i]=vg_shape_create(); if(!out[i]) "
        "{ for(size_t j=0;j<i;++j) vg_shape_destroy(out[j]); return false; } }",
    ]
    for i in range(n):
        lines.append(f"  if(!{sym}_build_{i}(out[{i}])) return false;")
    lines += ["  return true;", "}"]
    return "\n".join(lines) + "\n"


def emit_header(names: list[str], prefix: str, upscale: int = 1) -> str:
    """Shared header declaring every generated icon function."""
    upscale = max(upscale, 1)
    lines = [
        "// Generated icons header",
        "#pragma once",
        "#include <stddef.h>",
        "#include <vg/shape.h>",
        "",
        "#ifndef SVG2PIX_UPSCALE",
        f"#define SVG2PIX_UPSCALE {upscale}",
        "#endif",
        "",
    ]
    for n in names:
        lines.append(f"bool {prefix}{sanitize_ident(n)}(vg_shape_t **out, size_t *count);")
    return "\n".join(lines) + "\n"
