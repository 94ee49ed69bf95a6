import logging
import sys

from PyQt6.QtWidgets import QApplication

# The main application logic, including the memo window and the gesture-driven
# style controls, is encapsulated in the DragStyleApp class in src/dragstyle/app.py.
try:
    from dragstyle.app import DragStyleApp
    from dragstyle.config import get_config
except ImportError as e:
    print("Error: Could not import the main application class 'DragStyleApp'.")
    print("Please install the project first (e.g. `pip install -e .`).")
    print(f"Details: {e}")
    sys.exit(1)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def main():
    """
    The main entry point for the DragStyle application.

    This function configures logging, initializes the QApplication, creates the
    main application controller (DragStyleApp), and starts the event loop.
    """
    config = get_config()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO), format=LOG_FORMAT)

    app = QApplication(sys.argv)
    app.setApplicationName("DragStyle")

    drag_style_app = DragStyleApp(config)
    app.aboutToQuit.connect(drag_style_app.quit_app)
    drag_style_app.show()

    # The return value of exec() is the exit code.
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
