"""Entry point for UniMath.

Usage:
    unimath                       # full mode (daemon + tray)
    unimath --daemon              # daemon only (no GUI)
    unimath --tray                # tray GUI only
    unimath --expand '\\alpha'    # print the conversion of one escape word
    unimath --complete '\\al'     # list escape words starting with a prefix
    unimath --convert < in > out  # convert every escape word in a text stream
"""
import sys
import signal
import logging
import argparse


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _make_engine(config):
    from unimath.engine import UnicodeMath
    return UnicodeMath(italic=config.italic_prefix)


def run_full(config):
    """Run daemon + tray in a single process (default mode)."""
    from PyQt5.QtWidgets import QApplication
    from unimath.tray import TrayIcon
    from unimath.daemon import Daemon

    app = QApplication(sys.argv)
    app.setApplicationName("UniMath")
    app.setQuitOnLastWindowClosed(False)

    daemon = Daemon(config)
    tray = TrayIcon(config, daemon)
    tray.show()
    daemon.start()

    exit_code = app.exec_()
    daemon.stop()
    sys.exit(exit_code)


def run_daemon(config):
    """Run daemon only (headless, for systemd user service)."""
    import time
    from unimath.daemon import Daemon

    logger = logging.getLogger(__name__)
    logger.info("Starting UniMath daemon (headless mode)")

    daemon = Daemon(config)
    daemon.start()

    try:
        while daemon.running:
            time.sleep(0.2)
    except KeyboardInterrupt:
        pass
    finally:
        daemon.stop()
        logger.info("Daemon stopped")


def run_tray(config):
    """Run tray GUI only (shares the config file with a running daemon)."""
    from PyQt5.QtWidgets import QApplication
    from unimath.tray import TrayIcon
    from unimath.daemon import Daemon

    app = QApplication(sys.argv)
    app.setApplicationName("UniMath")
    app.setQuitOnLastWindowClosed(False)

    # Not started: only used for its engine and config
    daemon = Daemon(config)

    tray = TrayIcon(config, daemon)
    tray.show()

    exit_code = app.exec_()
    sys.exit(exit_code)


def expand_command(engine, token: str, out=None) -> int:
    """Print the expansion of token. Exit status 1 when there is none."""
    out = out or sys.stdout
    replacement = engine.evaluate(token, len(token))
    if replacement is None:
        return 1
    print(replacement.text, file=out)
    return 0


def complete_command(engine, prefix: str, limit=None, out=None) -> int:
    out = out or sys.stdout
    for item in engine.complete(prefix, len(prefix), limit=limit):
        print(f"{item.label}\t{item.insert_text}", file=out)
    return 0


def convert_command(engine, src=None, out=None) -> int:
    src = src or sys.stdin
    out = out or sys.stdout
    for line in src:
        out.write(engine.convert_line(line))
    return 0


def main(argv=None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    parser = argparse.ArgumentParser(
        prog="unimath",
        description="Type LaTeX-style escape words, get Unicode math symbols",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--daemon", action="store_true",
                       help="Run daemon only (headless, for systemd)")
    group.add_argument("--tray", action="store_true",
                       help="Run tray GUI only")
    group.add_argument("--expand", metavar="TOKEN",
                       help="Print the conversion of one escape word")
    group.add_argument("--complete", metavar="PREFIX",
                       help="List escape words starting with PREFIX")
    group.add_argument("--convert", action="store_true",
                       help="Convert escape words from stdin to stdout")
    parser.add_argument("--debug", action="store_true",
                        help="Verbose logging")
    args = parser.parse_args(argv)

    from unimath.config import Config
    config = Config()
    setup_logging(args.debug or config.debug_logging)

    if args.expand is not None:
        sys.exit(expand_command(_make_engine(config), args.expand))
    elif args.complete is not None:
        sys.exit(complete_command(_make_engine(config), args.complete,
                                  limit=config.completion_limit))
    elif args.convert:
        sys.exit(convert_command(_make_engine(config)))
    elif args.daemon:
        run_daemon(config)
    elif args.tray:
        run_tray(config)
    else:
        run_full(config)


if __name__ == "__main__":
    main()
