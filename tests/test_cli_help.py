from collab_history.argparsers.main_parser import create_main_parser


def test_main_help_includes_flags() -> None:
    """Help text should mention the service selection flags."""
    parser = create_main_parser()
    help_text = parser.format_help()

    assert "--demo" in help_text
    assert "--project" in help_text
    assert "--server-url" in help_text
    assert "--page-size" in help_text
    assert "--version" in help_text or "-v" in help_text


def test_defaults() -> None:
    args = create_main_parser().parse_args([])

    assert args.demo is False
    assert args.project is None
    assert args.page_size is None
