"""Entry point for the Columnfall falling-column puzzle."""
from columnfall.app import main


if __name__ == "__main__":
    main()
