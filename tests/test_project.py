import json
import subprocess
from pathlib import Path
from unittest import mock

from rustlings.project import Crate, RustAnalyzerProject


def test_crate_defaults():
    crate = Crate(root_module="exercises/intro/intro1.rs")
    assert crate.to_dict() == {
        "root_module": "exercises/intro/intro1.rs",
        "edition": "2021",
        "deps": [],
        "cfg": ["test"],
    }


def test_crate_defaults_are_not_shared():
    first = Crate("a.rs")
    second = Crate("b.rs")
    first.cfg.append("other")
    assert second.cfg == ["test"]


def test_new_project_is_empty():
    project = RustAnalyzerProject()
    assert project.to_dict() == {"sysroot_src": "", "crates": []}


def test_add_path_only_rust_files():
    project = RustAnalyzerProject()
    project.add_path("exercises/a.rs")
    project.add_path("exercises/README.md")
    project.add_path("exercises/clippy")
    assert [c.root_module for c in project.crates] == ["exercises/a.rs"]


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "a").mkdir(parents=True)
    (tmp_path / "exercises" / "a" / "x.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "b.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "README.md").write_text("notes\n")
    project = RustAnalyzerProject()
    project.exercises_to_json()
    assert [c.root_module for c in project.crates] == ["exercises/a/x.rs", "exercises/b.rs"]


def test_exercises_to_json_missing_dir(tmp_path):
    project = RustAnalyzerProject()
    project.exercises_to_json(tmp_path / "nothing")
    assert project.crates == []


def test_write_to_disk_round_trip(tmp_path):
    project = RustAnalyzerProject(sysroot_src="/sysroot")
    project.add_path("exercises/b.rs")
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    text = target.read_text()
    assert json.loads(text) == project.to_dict()
    assert " " not in text


def test_sysroot_from_environment(monkeypatch):
    monkeypatch.setenv("RUST_SRC_PATH", "/custom/src")
    project = RustAnalyzerProject()
    with mock.patch("rustlings.project.subprocess.run") as run:
        project.get_sysroot_src()
    assert project.sysroot_src == "/custom/src"
    assert run.call_count == 0


def test_sysroot_from_rustc(monkeypatch, capsys):
    monkeypatch.delenv("RUST_SRC_PATH", raising=False)
    project = RustAnalyzerProject()
    toolchain = "/opt/toolchains/stable"
    result = subprocess.CompletedProcess(["rustc"], 0, f"{toolchain}\n".encode(), b"")
    with mock.patch("rustlings.project.subprocess.run", return_value=result) as run:
        project.get_sysroot_src()
    assert run.call_args.args[0] == ["rustc", "--print", "sysroot"]
    assert Path(project.sysroot_src).parts[-5:] == ("lib", "rustlib", "src", "rust", "library")
    assert project.sysroot_src.startswith(toolchain)
    assert f"Determined toolchain: {toolchain}" in capsys.readouterr().out