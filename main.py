"""Entry point for the Elm translations generator."""

from elm_i18n.cli import main


if __name__ == "__main__":
    main()
