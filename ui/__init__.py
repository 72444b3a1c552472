"""Kivy presentation layer."""
