"""
Momentum — progress & personalization engine.

Pure computation, no I/O:

* :mod:`app.momentum.metrics` — BMI/BMR/TDEE and energy targets
* :mod:`app.momentum.profile` — athletic profile classification
* :mod:`app.momentum.plan` — periodized training + nutrition plans
* :mod:`app.momentum.ledger` — activity event → progress state fold
* :mod:`app.momentum.levels` — XP level curve
* :mod:`app.momentum.achievements` — achievement rules
* :mod:`app.momentum.trends` — sample history trends
"""
