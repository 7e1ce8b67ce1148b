import os
import subprocess
from pathlib import Path

ROOT = Path(__file__).resolve().parent
PYTHON_DIR = os.path.join(ROOT, "src", "py")


def run(cmd, **kwargs):
    print(" ".join(cmd))
    subprocess.run(cmd, check=True, **kwargs)


def main():
    env = os.environ.copy()
    python_paths = [
        str(Path(PYTHON_DIR) / "subject_observer"),
    ]
    env["PYTHONPATH"] = os.pathsep.join(python_paths)
    # Run python unit tests and the demo scenario
    run(
        ["python", "-m", "pytest", "-v"],
        cwd=PYTHON_DIR,
        env=env,
    )


if __name__ == "__main__":
    main()
