#!/usr/bin/env python
"""Readers, writers, and openers for text streams

    ==========================================   ==========================================================
    **Module**                                   **Contents**
    ------------------------------------------   ----------------------------------------------------------
    :py:mod:`~colorconv.util.io.filters`         Pipe-like readers and writers that wrap streams
    :py:mod:`~colorconv.util.io.openers`         Open plain or compressed files; name scripts
    ==========================================   ==========================================================
"""
