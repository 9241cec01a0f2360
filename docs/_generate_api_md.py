from __future__ import annotations

import re
import sys
from pathlib import Path

from bs4 import BeautifulSoup
from markdownify import markdownify
from pdoc import doc as pdoc_doc
from pdoc import render


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

PACKAGE = "fuzzy_intervals"
OUTPUT = Path(__file__).with_name("api.md")

# Reference order: the arithmetic core first, then the layers built on it.
SECTIONS: list[tuple[str, list[str]]] = [
    (
        "Core arithmetic",
        ["errors", "intervals", "fuzzy", "defuzz"],
    ),
    (
        "Bond valuation and analysis",
        ["data", "model", "visualization", "sensitivity", "examples.bond_instance"],
    ),
]

_HEADING = re.compile(r"^h([1-5])$")


def collect_modules(root: str) -> dict[str, pdoc_doc.Module]:
    modules: dict[str, pdoc_doc.Module] = {}
    stack = [pdoc_doc.Module.from_name(root)]
    while stack:
        module = stack.pop()
        if module.modulename in modules:
            continue
        modules[module.modulename] = module
        stack.extend(module.submodules)
    return modules


def check_sections(all_modules: dict[str, pdoc_doc.Module]) -> None:
    """Every documented module must be assigned to exactly one section."""
    listed = [f"{PACKAGE}.{name}" for _, names in SECTIONS for name in names]
    missing = sorted(
        name for name, module in all_modules.items()
        if name not in listed and not module.is_package
    )
    unknown = sorted(name for name in listed if name not in all_modules)
    if missing or unknown:
        raise RuntimeError(
            f"API sections out of date: unassigned={missing}, not found={unknown}."
        )


def module_markdown(module: pdoc_doc.Module, all_modules: dict[str, pdoc_doc.Module]) -> str:
    html = render.html_module(module, all_modules)
    soup = BeautifulSoup(html, "html.parser")
    main = soup.find("main", {"class": "pdoc"})
    if main is None:
        raise RuntimeError(f"Failed to locate pdoc main content for {module.modulename}.")

    # Modules nest under their section heading.
    for tag in main.find_all(_HEADING):
        tag.name = f"h{int(tag.name[1]) + 1}"

    return markdownify(str(main), heading_style="ATX").strip()


def build_markdown(all_modules: dict[str, pdoc_doc.Module]) -> str:
    render.configure(docformat="numpy", search=False, show_source=False)
    check_sections(all_modules)

    lines = [
        "# fuzzy_intervals API Reference",
        "",
        "> _Generated automatically with pdoc._",
        "",
    ]
    for title, names in SECTIONS:
        lines.append(f"- {title}: " + ", ".join(f"`{PACKAGE}.{name}`" for name in names))
    lines.append("")

    for title, names in SECTIONS:
        lines.extend([f"# {title}", ""])
        for name in names:
            lines.extend([module_markdown(all_modules[f"{PACKAGE}.{name}"], all_modules), ""])

    return "\n".join(lines).rstrip() + "\n"


def main() -> None:
    modules = collect_modules(PACKAGE)
    OUTPUT.write_text(build_markdown(modules), encoding="utf-8")


if __name__ == "__main__":
    main()
