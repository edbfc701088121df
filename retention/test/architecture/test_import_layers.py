from __future__ import annotations

from ._gate import require_arch_checks_enabled
from ._utils import iter_python_files, matches_prefix, package_root, parse_imports


def _offenders(subdir: str, forbidden: tuple[str, ...]) -> list[str]:
    root = package_root()
    offenders: list[str] = []
    for file_path in iter_python_files(root / subdir):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, prefix) for prefix in forbidden):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")
    return offenders


def test_services_do_not_import_cli_or_typer() -> None:
    require_arch_checks_enabled()

    offenders = _offenders("services", ("retention.cli", "typer"))
    assert not offenders, "services -> cli dependency violations:\n" + "\n".join(offenders)


def test_core_depends_on_nothing_else_in_the_package() -> None:
    require_arch_checks_enabled()

    offenders = _offenders(
        "core", ("retention.cli", "retention.services", "retention.output")
    )
    assert not offenders, "core dependency violations:\n" + "\n".join(offenders)
