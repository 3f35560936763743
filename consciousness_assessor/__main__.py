"""Entry point for ``python -m consciousness_assessor``: the demonstration run."""

from consciousness_assessor.demo import main

main()
