"""Functional primitives for funclite.

This package provides the collection helpers (``collection_ops``) and reusable
predicates (``predicates``). Helpers are stateless and side-effect-free with
respect to their inputs so they can be composed into small data pipelines.
"""
