"""Kernel – primitives shared by every beaver subpackage."""
