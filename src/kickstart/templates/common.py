"""Files shared by all bundled templates."""

import json
from pathlib import Path


def write_file(path: Path, content: str) -> None:
    """Write file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def write_json(path: Path, data: dict) -> None:
    write_file(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")


def npmrc(data: dict) -> str:
    lines = [f"registry={data['registry']}"]
    if data.get("extraNpmrc"):
        lines.append(data["extraNpmrc"])
    return "\n".join(lines) + "\n"


def husky_package_fields(data: dict) -> dict:
    """package.json additions when husky is kept."""
    if not data.get("withHusky"):
        return {}
    return {
        "scripts": {"prepare": "husky"},
        "lint-staged": {
            "*.{js,jsx,ts,tsx,css,less,md,json}": ["prettier --write"],
        },
        "devDependencies": {"husky": "^9", "lint-staged": "^13.2.0"},
    }


def merge_package(base: dict, extra: dict) -> dict:
    """Merge extra into base one level deep (scripts, dependencies, ...)."""
    merged = dict(base)
    for key, value in extra.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def write_common_files(target: Path, data: dict) -> None:
    """.npmrc, .gitignore, prettier config and husky hooks."""
    write_file(target / ".npmrc", npmrc(data))

    write_file(target / ".gitignore", """/node_modules
/.env.local
/.umirc.local.ts
/config/config.local.ts
/src/.umi
/src/.umi-production
/src/.umi-test
/dist
/.mfsu
.swc
""")

    write_file(target / ".prettierrc", """{
  "printWidth": 80,
  "singleQuote": true,
  "trailingComma": "all",
  "proseWrap": "never"
}
""")

    # Always written; reconciliation removes them when husky is not kept
    write_file(target / ".husky" / "commit-msg", """npx --no-install umi verify-commit $1
""")
    write_file(target / ".husky" / "pre-commit", """npx --no-install lint-staged --quiet
""")
