"""Generation of rust-project.json for rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file treated as a crate root."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "sysroot_src": self.sysroot_src,
            "crates": [crate.to_dict() for crate in self.crates],
        }

    def write_to_disk(self, path: str | os.PathLike = "rust-project.json") -> None:
        """Write the project as compact JSON."""
        Path(path).write_text(
            json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False),
            encoding="utf-8",
        )

    def add_path(self, path: str | os.PathLike) -> None:
        """Add a crate for the path if it is a .rs file."""
        path = Path(path)
        if path.suffix == ".rs":
            self.crates.append(Crate(root_module=str(path)))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file below the exercises directory."""
        for path in sorted(Path(root).glob("**/*"), key=str):
            self.add_path(path)

    def get_sysroot_src(self) -> None:
        """Locate the standard library sources, via RUST_SRC_PATH or rustc."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return
        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        output = result.stdout.decode("utf-8", errors="replace")
        parts = output.split()
        toolchain = parts[0] if parts else output
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )