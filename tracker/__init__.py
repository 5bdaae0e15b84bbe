"""Dot point tracker: syllabus mastery tracking with weighted study suggestions."""

__version__ = "1.0.0"
