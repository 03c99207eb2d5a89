"""
Static type checker runner.

Some exercises are only meaningful to a type checker: passing a `Dog` where
a `Biped & Hairy` is required must be rejected before the program ever runs.
The snippets in `typedrills/snippets` state what they expect on their first
line (`# expect: ok` or `# expect: error`) and this module runs the configured
checkers over them.
"""

import datetime
import glob as glob_module
import json
import os
import re
import subprocess
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path

from typedrills.config import Settings

EXPECT_PATTERN = re.compile(r"^#\s*expect:\s*(?P<status>ok|error)\s*$", re.MULTILINE)


@dataclass
class CheckerResult:
    status: str  # "ok" or "error"
    output: str


def _checker_env() -> dict[str, str]:
    """Environment that lets the checkers resolve `import typedrills`."""
    env = dict(os.environ)
    package_root = Path(__file__).resolve().parents[1]
    # mypy refuses site-packages on MYPYPATH; installed copies are found anyway.
    if package_root.name != "site-packages":
        existing = env.get("MYPYPATH")
        env["MYPYPATH"] = (
            f"{package_root}{os.pathsep}{existing}" if existing else str(package_root)
        )
    return env


def run_tool(command: list[str], filepath: str, timeout: float = 120.0) -> CheckerResult:
    """Runs a single type checker command on a file."""
    try:
        result = subprocess.run(
            command + [filepath],
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
            env=_checker_env(),
        )
    except FileNotFoundError:
        return CheckerResult(
            status="error", output=f"Error: Command '{command[0]}' not found in PATH."
        )
    except subprocess.TimeoutExpired:
        return CheckerResult(status="error", output="Timeout")

    output = result.stdout
    if result.stderr:
        output += "\n[STDERR]\n" + result.stderr

    status = "ok" if result.returncode == 0 else "error"

    # Some checkers return 0 but still report errors
    output_lower = output.lower()
    if "error" in output_lower and "0 error" not in output_lower:
        status = "error"

    return CheckerResult(status=status, output=output.strip() or "Success (No Output)")


def run_all_checkers(filepath: str, settings: Settings | None = None) -> dict[str, CheckerResult]:
    """Run all configured checkers on one file."""
    settings = settings or Settings()
    return {
        name: run_tool(command, filepath, timeout=settings.timeout)
        for name, command in settings.checkers.items()
    }


def check_source(code: str, settings: Settings | None = None) -> dict[str, CheckerResult]:
    """Write `code` to a temporary module and run all configured checkers on it."""
    with tempfile.TemporaryDirectory(prefix="typedrills_") as temp_dir:
        temp_path = os.path.join(temp_dir, "snippet.py")
        with open(temp_path, "w", encoding="utf-8") as f:
            f.write(code)
        return run_all_checkers(temp_path, settings)


def expected_status(code: str) -> str | None:
    """The status a snippet declares with `# expect: ok|error`, if any."""
    match = EXPECT_PATTERN.search(code)
    return match.group("status") if match else None


def get_snippet_files(directory: Path) -> list[str]:
    if not directory.is_dir():
        raise FileNotFoundError(f"Directory '{directory}' does not exist.")

    py_files = sorted(glob_module.glob(os.path.join(directory, "*.py")))
    if not py_files:
        raise FileNotFoundError(f"No .py files found to check in '{directory}'.")
    return py_files


def run_checkers(
    target_dir: Path | None = None,
    output_dir: Path | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Run type checkers on the Python files in the target directory.
    Returns the path to the results.json file.
    """
    settings = settings or Settings()
    target_dir = Path(target_dir) if target_dir is not None else settings.snippets_dir
    output_dir = Path(output_dir) if output_dir is not None else Path.cwd()

    py_files = get_snippet_files(target_dir)

    print(f"--- Running Type Checkers on {len(py_files)} files ---")
    print(f"Directory: {target_dir}\n")

    all_results = []

    for filepath in py_files:
        filename = os.path.basename(filepath)
        print(f"Checking {filename}...")

        with open(filepath, encoding="utf-8") as f:
            expected = expected_status(f.read())

        outputs = run_all_checkers(filepath, settings)
        file_result = {
            "filename": filename,
            "filepath": filepath,
            "expected": expected,
            "outputs": {name: asdict(result) for name, result in outputs.items()},
        }

        for name, result in outputs.items():
            if expected is not None and result.status != expected:
                print(f"  [WARNING] {name}: expected {expected}, got {result.status}")

        all_results.append(file_result)

    output_dir.mkdir(parents=True, exist_ok=True)
    results_json_path = os.path.join(output_dir, "results.json")

    final_output = {
        "timestamp": datetime.datetime.now().isoformat(),
        "checkers_used": list(settings.checkers.keys()),
        "results": all_results,
    }

    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(final_output, f, indent=4)

    print(f"\n[SUCCESS] Results saved to: {results_json_path}")

    return results_json_path
