"""``python -m ops_bridge`` entry point."""

from ops_bridge.clients.disc import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
