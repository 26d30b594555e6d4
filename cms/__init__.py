"""Bilingual content and configuration service."""
