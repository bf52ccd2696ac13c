"""Unit tests for console output helpers."""

from visionfi_cli.lib import output


class TestStatusMessages:
    def test_error_goes_to_stderr(self, capsys):
        output.error("Authentication failed.")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "✗ Authentication failed.\n"

    def test_success_and_warning_go_to_stdout(self, capsys):
        output.success("Done")
        output.warning("Careful")

        assert capsys.readouterr().out == "✓ Done\n⚠ Careful\n"

    def test_colors_when_enabled(self, capsys):
        output.set_color_enabled(True)

        output.success("Done")

        assert capsys.readouterr().out == f"{output.Colors.GREEN}✓{output.Colors.RESET} Done\n"


class TestStatusLine:
    def test_plain_without_colors(self, capsys):
        output.status_line("Authentication Status", "Authenticated", True)
        assert capsys.readouterr().out == "Authentication Status: Authenticated\n"

    def test_bad_state_is_red(self, capsys):
        output.set_color_enabled(True)

        output.status_line("Authentication Status", "Not Authenticated", False)

        assert f"{output.Colors.RED}Not Authenticated" in capsys.readouterr().out


class TestPrintDict:
    def test_nested_and_list_values(self, capsys):
        output.print_dict({"client": {"name": "Acme", "workflows": ["w2", "w9"]}, "active": True})

        assert capsys.readouterr().out == "client:\n  name: Acme\n  workflows: w2, w9\nactive: True\n"


def test_print_json(capsys):
    output.print_json({"score": 0.98})
    assert capsys.readouterr().out == '{\n  "score": 0.98\n}\n'
