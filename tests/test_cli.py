from railwind.cli import main
from railwind.compiler import parse_html_to_string, parse_string


def test_html_input(tmp_path, capsys):
    source = tmp_path / "page.html"
    source.write_text('<p class="float-left bogus"></p>', encoding="utf-8")
    output = tmp_path / "out.css"

    assert main([str(source), "-o", str(output)]) == 0

    expected_css, _ = parse_html_to_string(source)
    assert output.read_text(encoding="utf-8") == expected_css
    printed = capsys.readouterr().out
    assert "Could not match class 'bogus'" in printed


def test_text_input(tmp_path, capsys):
    source = tmp_path / "classes.txt"
    source.write_text("italic\nnope", encoding="utf-8")
    output = tmp_path / "styles.css"

    assert main([str(source), "--output", str(output)]) == 0

    expected_css, warnings = parse_string("italic\nnope")
    assert output.read_text(encoding="utf-8") == expected_css
    assert capsys.readouterr().out.splitlines() == [str(w) for w in warnings]


def test_input_without_extension_writes_nothing(tmp_path, capsys):
    source = tmp_path / "classes"
    source.write_text("italic", encoding="utf-8")
    output = tmp_path / "out.css"

    assert main([str(source), "-o", str(output)]) == 0
    assert not output.exists()
    assert capsys.readouterr().out == ""


def test_default_output_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    source = tmp_path / "a.txt"
    source.write_text("italic", encoding="utf-8")

    assert main([str(source)]) == 0
    assert (tmp_path / "railwind.css").read_text(encoding="utf-8").startswith(".italic {")