"""Generate the stylesheet entry that forwards the Bulma Sass sources."""

from __future__ import annotations

import argparse
import subprocess
from pathlib import Path, PurePath

_NPM_INSTALL = ["npm", "--prefix", "./target", "install", "bulma@1.0"]


def sass_prefix(output_dir: str | PurePath) -> str:
    """The relative prefix leading from output_dir back to the working directory."""
    return "../" * len(PurePath(output_dir).parts)


def build(output_dir: str | Path, main_scss_path: str | Path) -> Path:
    """Install Bulma and write leptos-bulma.scss into output_dir; return its path."""
    output_dir = Path(output_dir)
    output_path = output_dir / "leptos-bulma.scss"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        pass

    with open(output_path, "w", encoding="utf-8") as output_file:
        try:
            subprocess.run(_NPM_INSTALL, capture_output=True, check=False)
        except OSError as exc:
            raise RuntimeError("Could not install Bulma") from exc

        header = f'@forward "{sass_prefix(output_dir)}target/node_modules/bulma/sass";\n\n'
        main_content = Path(main_scss_path).read_text(encoding="utf-8")
        output_file.write(header + main_content)
    return output_path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate leptos-bulma.scss.")
    parser.add_argument("output_dir", nargs="?", default="./style")
    parser.add_argument("--main-scss", default="style/main.scss")
    args = parser.parse_args(argv)
    build(args.output_dir, args.main_scss)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())