"""Worked solutions to the exercises, as plain functions and types."""