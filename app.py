#!/usr/bin/env python3
"""NameForge Hugging Face Spaces entry point."""

from name_forge.app.app import main


if __name__ == "__main__":
    main()
