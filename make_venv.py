"""Helper script that creates a virtual environment with the engine and its test tools installed."""

from __future__ import annotations

import argparse
import os
from pathlib import Path
import subprocess
import sys

_IS_WINDOWS = os.name == "nt"


def run_command(command: list[str]) -> None:
	"""Run a subprocess command and bubble up errors."""
	subprocess.run(command, check=True)


def venv_python(venv_path: Path) -> Path:
	if _IS_WINDOWS:
		return venv_path / "Scripts" / "python.exe"
	return venv_path / "bin" / "python"


def launch_shell_with_venv(venv_path: Path) -> None:
	"""Open a shell with the virtual environment activated."""
	if _IS_WINDOWS:
		activate_script = venv_path / "Scripts" / "activate.bat"
	else:
		activate_script = venv_path / "bin" / "activate"
	if not activate_script.exists():
		raise FileNotFoundError(f"Activation script not found at {activate_script}")

	print("Dropping you into a shell with the virtual environment activated.")
	print("Type 'exit' to leave the environment.")
	if _IS_WINDOWS:
		subprocess.run(["cmd.exe", "/k", str(activate_script)], check=True)
	else:
		subprocess.run(["/bin/bash", "-c", f"source '{activate_script}' && exec $SHELL"], check=True)


def main() -> None:
	parser = argparse.ArgumentParser(description=__doc__)
	parser.add_argument("--no-shell", action="store_true", help="Only create the environment")
	parser.add_argument("--no-tests", action="store_true", help="Skip the pytest/httpx test extra")
	args = parser.parse_args()

	project_root = Path(__file__).resolve().parent
	venv_path = project_root / ".venv"
	python_exe = sys.executable

	print(f"Using Python interpreter: {python_exe}")
	run_command([python_exe, "-m", "venv", str(venv_path)])

	python = str(venv_python(venv_path))
	run_command([python, "-m", "pip", "install", "--upgrade", "pip"])
	target = "." if args.no_tests else ".[test]"
	run_command([python, "-m", "pip", "install", "-e", target])

	if not args.no_shell:
		launch_shell_with_venv(venv_path)


if __name__ == "__main__":
	main()
