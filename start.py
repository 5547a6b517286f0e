"""Simple launcher for the atlas.

This script asks whether you want to export the network as a standalone
HTML page or start the interactive Gradio app.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent

    print("=== Artasia Atlas launcher ===")
    print("1) Export HTML (artasia_atlas.pipeline)")
    print("2) Interactive app (apps/app.py)")
    choice = input("Choice (1/2, export/app): ").strip().lower()

    if choice in {"2", "app", "a"}:
        cmd = [sys.executable, str(project_root / "apps" / "app.py")]
    elif choice in {"1", "export", "e", "html"}:
        cmd = [sys.executable, "-m", "artasia_atlas.pipeline"]
    else:
        print("Unrecognized choice, exporting HTML.")
        cmd = [sys.executable, "-m", "artasia_atlas.pipeline"]

    print(f"Running: {' '.join(cmd)}")
    subprocess.run(cmd, check=False, cwd=project_root)


if __name__ == "__main__":
    main()
