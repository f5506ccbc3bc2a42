from __future__ import annotations

from ._gate import require_arch_checks_enabled
from ._utils import iter_python_files, matches_prefix, mobrel_root, parse_imports

# Package -> packages it must never import.
FORBIDDEN = {
    "core": ("mobrel.cli", "mobrel.services", "mobrel.release", "mobrel.validation"),
    "version": ("mobrel.cli", "mobrel.services", "mobrel.git"),
    "changelog": ("mobrel.cli", "mobrel.services", "mobrel.git"),
    "collaborators": ("mobrel.cli", "mobrel.services", "mobrel.release", "mobrel.validation"),
    "validation": ("mobrel.cli", "mobrel.services", "mobrel.release"),
    "release": ("mobrel.cli", "mobrel.services", "mobrel.validation"),
    "services": ("mobrel.cli",),
}


def test_lower_layers_do_not_import_upper_layers() -> None:
    require_arch_checks_enabled()

    root = mobrel_root()
    offenders: list[str] = []

    for package, forbidden in FORBIDDEN.items():
        for file_path in iter_python_files(root / package):
            rel = file_path.relative_to(root)
            for item in parse_imports(file_path):
                if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                    offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "layer dependency violations:\n" + "\n".join(offenders)
