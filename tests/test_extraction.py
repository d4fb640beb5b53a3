import textwrap
from pathlib import Path

import pytest

from dql_format.core.scanner import (
    DqlCommand,
    ScanResult,
    extract_dql_commands,
    extract_strings,
    find_dql_commands,
    format_dql_command,
    is_dql_content,
    scan_code_files,
    scan_file,
    unwrap_literal,
)
from dql_format.filters import PathspecFilter


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_end_to_end_example():
    content = 'const q1 = "data from logs"; const q2 = "| filter status == 200"; const q3 = "not dql";'
    assert extract_dql_commands(content) == ["data from logs", "| filter status == 200"]


def test_no_literals():
    content = "function add(a, b) { return a + b; }"
    assert extract_strings(content) == []
    assert extract_dql_commands(content) == []


def test_duplicates_are_kept():
    content = "a('fetch logs'); b('fetch logs');"
    assert extract_dql_commands(content) == ["fetch logs", "fetch logs"]


def test_result_is_unwrapped_token():
    content = textwrap.dedent("""
        const a = `fetch spans
        | filter ${field} == "x"
        | summarize count()`;
        const b = '| sort timestamp desc';
        const c = "hello";
    """)
    accepted = [t for t in extract_strings(content) if is_dql_content(t)]
    assert extract_dql_commands(content) == [unwrap_literal(t) for t in accepted]
    assert [t[1:-1] for t in accepted] == extract_dql_commands(content)
    assert len(accepted) == 2


def test_find_dql_commands_positions():
    content = "const a = 1;\nconst q = `fetch logs\n| limit 5`;\nconst r = 'timeseries avg(x)';\n"
    commands = find_dql_commands(content, "q.ts")
    assert commands == [
        DqlCommand(command="fetch logs\n| limit 5", file_path="q.ts", line_number=2, column_number=10),
        DqlCommand(command="timeseries avg(x)", file_path="q.ts", line_number=4, column_number=10),
    ]


def test_scan_file(tmp_path):
    path = write(tmp_path / "queries.js", 'run("fetch bizevents | limit 10");\n')
    commands = scan_file(path, "queries.js")
    assert [c.command for c in commands] == ["fetch bizevents | limit 10"]
    assert commands[0].file_path == "queries.js"


def test_scan_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        scan_file(tmp_path / "missing.js")


def test_scan_code_files_respects_ignores(tmp_path):
    write(tmp_path / ".gitignore", "ignored/\n")
    write(tmp_path / "src" / "a.ts", 'const q = "fetch logs";\n')
    write(tmp_path / "src" / "notes.txt", '"fetch logs"\n')
    write(tmp_path / "node_modules" / "lib" / "b.js", '"fetch logs"\n')
    write(tmp_path / "ignored" / "c.js", '"fetch logs"\n')
    write(tmp_path / "pkg" / ".gitignore", "gen.js\n")
    write(tmp_path / "pkg" / "gen.js", '"fetch logs"\n')
    write(tmp_path / "pkg" / "keep.js", "'| summarize count()'\n")

    seen = []
    result = scan_code_files(tmp_path, on_file=lambda path, lang: seen.append((path, lang)))

    assert [(c.file_path, c.command) for c in result.commands] == [
        ("pkg/keep.js", "| summarize count()"),
        ("src/a.ts", "fetch logs"),
    ]
    assert result.files_scanned == 2
    assert seen == [("pkg/keep.js", "javascript"), ("src/a.ts", "typescript")]


def test_scan_code_files_skips_unreadable(tmp_path, caplog):
    (tmp_path / "bad.js").write_bytes(b'\xff\xfe"fetch logs"')
    write(tmp_path / "good.js", '"fetch logs"')

    result = scan_code_files(tmp_path)

    assert result.unreadable_files == ["bad.js"]
    assert result.files_scanned == 1
    assert [c.file_path for c in result.commands] == ["good.js"]
    assert "Failed to read bad.js" in caplog.text


def test_format_dql_command():
    cmd = DqlCommand(command="fetch logs", file_path="a.ts", line_number=3, column_number=7)
    assert format_dql_command(cmd) == "dql-format: fetch logs"
    assert format_dql_command(cmd, ide_format=True) == "a.ts:3:7: fetch logs"


def test_scan_result_json():
    result = ScanResult(
        commands=[DqlCommand("fetch logs", "a.ts", 1, 4)],
        files_scanned=3,
        unreadable_files=["b.js"],
    )
    assert ScanResult.from_json(result.to_json()) == result


def test_scan_file_keeps_crlf(tmp_path):
    path = tmp_path / "crlf.ts"
    path.write_bytes(b"const q = `fetch logs\r\n| limit 5`;\r\nconst r = 'data\rfrom x';\r\n")

    commands = scan_file(path, "crlf.ts")

    assert [c.command for c in commands] == ["fetch logs\r\n| limit 5", "data\rfrom x"]
    assert [c.command for c in commands] == extract_dql_commands(path.read_bytes().decode("utf-8"))


def test_scan_code_files_does_not_enter_ignored_dirs(tmp_path, monkeypatch):
    write(tmp_path / ".gitignore", "generated/\n")
    write(tmp_path / "src" / "a.ts", '"fetch logs"\n')
    write(tmp_path / "node_modules" / "dep" / "index.js", '"fetch logs"\n')
    write(tmp_path / "node_modules" / "dep" / ".gitignore", "*.js\n")
    write(tmp_path / "generated" / "out.js", '"fetch logs"\n')
    write(tmp_path / "dist" / "bundle.js", '"fetch logs"\n')

    visited = []
    original_iterdir = Path.iterdir

    def recording_iterdir(self):
        visited.append(self.relative_to(tmp_path).as_posix())
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", recording_iterdir)
    result = scan_code_files(tmp_path)

    assert [c.file_path for c in result.commands] == ["src/a.ts"]
    assert sorted(visited) == [".", "src"]


def test_pathspec_filter_matches_directories(tmp_path):
    write(tmp_path / ".gitignore", "cache/\n")
    (tmp_path / "cache").mkdir()
    path_filter = PathspecFilter(tmp_path)

    assert path_filter.should_ignore(tmp_path / "cache", is_dir=True)
    assert path_filter.should_ignore(tmp_path / "node_modules", is_dir=True)
    assert not path_filter.should_ignore(tmp_path / "src", is_dir=True)
    assert not path_filter.should_ignore(tmp_path / "cache.js")
