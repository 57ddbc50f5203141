"""A small printf-style formatter: conversion helpers, sprintf/printf and a demo."""

__version__ = "1.0.0"
__all__ = ["conversions", "printf", "demo"]