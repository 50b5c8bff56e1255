"""Pennywise - a personal finance tracker for transactions, savings goals and tasks."""
