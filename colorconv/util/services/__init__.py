#!/usr/bin/env python
"""Function decorators and warnings

Package overview
================

    ===============================================  ==============================================
    **Package module**                               **Contents**
    -----------------------------------------------  ----------------------------------------------
    :py:mod:`~colorconv.util.services.decorators`    Function decorators
    :py:mod:`~colorconv.util.services.exceptions`    Warning types and the `onceperfamily` filter
    ===============================================  ==============================================
"""
