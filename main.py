# Main.py
""""" Entry point for TreeCalc.

   Responsibilities:
   - Verify required files exist when running from a source checkout
   - Load configuration and start the terminal UI

"""""
import sys
from pathlib import Path
from TreeCalc import config_manager as config_manager, UI as UI, error as E


PROJECT_ROOT = Path(__file__).resolve().parent


def check_files_exist():

    """
      Fail fast if required files are missing / moved / renamed.
    """

    modules_dir = PROJECT_ROOT / "TreeCalc"

    REQUIRED = [
        modules_dir / "UI.py",
        modules_dir / "MathEngine.py",
        modules_dir / "error.py",
        modules_dir / "config_manager.py",
        modules_dir / "config.json",
    ]

    missing_files = []
    for file_path in REQUIRED:
        if not file_path.exists():
            missing_files.append(file_path.name)

    if missing_files:
        print("Error: The following files are missing or in the wrong location:", file=sys.stderr)
        for file_name in missing_files:
            print(f"- {file_name}", file=sys.stderr)
        sys.exit(1)


def main():

    """
    Load configuration and start the UI.
    - Keep this thin: no business logic here.
    """

    try:
        all_settings = config_manager.load_setting_value("all")
    except E.ConfigurationError as e:
        UI.show_error(e)
        sys.exit(1)

    if all_settings["debug"]:
        print("Config loaded:", all_settings, file=sys.stderr)

    # Delegate control to the UI layer; typer owns argument parsing.
    UI.main()


if __name__ == "__main__":
    check_files_exist()
    main()
