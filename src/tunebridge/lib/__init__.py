"""Domain-specific library modules.

Modules here provide the pure matching and scoring logic (similarity
primitives, candidate classification, strategy scorers, keyword
extraction). Pure utilities that don't depend on domain models live in
``tunebridge.utils`` instead.

Consumers should import directly from submodules::

    from tunebridge.lib.similarity import string_similarity
    from tunebridge.lib.matching import classify_candidates
"""
