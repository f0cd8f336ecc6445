"""Helpers for Rust learning exercises: rust-analyzer project files, status lines and worked solutions."""

__version__ = "5.5.1"