#!/usr/bin/env python3
import os
import sys

def main():
    # Find where the 'pomodoro_deck' package lives and put its parent
    # directory on the path before importing the app.
    try:
        import pomodoro_deck
        install_path = os.path.dirname(os.path.abspath(list(pomodoro_deck.__path__)[0]))
        if install_path not in sys.path:
            sys.path.insert(0, install_path)
    except ImportError:
        # Fallback for running the script directly during development
        project_root = os.path.abspath(os.path.join(os.path.dirname(__file__)))
        if project_root not in sys.path:
            sys.path.insert(0, project_root)

    from pomodoro_deck.main_qt import main as app_main
    sys.exit(app_main())

if __name__ == '__main__':
    main()
