"""
flockcalc — KPI calculations for broiler batches

Layers:
- flockcalc.core.math      pure zootechnical and financial formulas
- flockcalc.core.domain    batch/log models, units, feed plan
- flockcalc.core.contracts JSON Schema checks for log entries
- flockcalc.display        date arithmetic, localized labels and numbers
- flockcalc.reports        per-screen reducers over batches and logs
"""

__version__ = "0.1.0"
