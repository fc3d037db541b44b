"""
bwcqa - backwards-compatibility QA tooling.

Two loosely coupled pieces live here:

- bwcqa.expectations: register expectations about log events and match
  every observed event against them, safely across threads.
- bwcqa.upgrade: build and run the four step rolling-upgrade chain for each
  tracked historical version of a cluster.

Usage:
    from bwcqa.expectations import ExpectationRegistry, SeenExpectation
    from bwcqa.upgrade import UpgradeGraph, UpgradeRunner
"""
