"""Kindle clippings to Markdown converter"""
