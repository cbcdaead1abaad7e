"""Geometry predicates and map layer builders."""
