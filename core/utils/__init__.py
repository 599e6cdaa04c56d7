"""Utility helpers"""
