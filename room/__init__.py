"""
Room: an experiment to test The Room Hypothesis of Common Sense
===============================================================

Paper: https://github.com/advancedresearch/path_semantics/blob/master/papers-wip/the-room-hypothesis-of-common-sense.pdf

The Room Hypothesis of Common Sense states that artificial common sense can be
modeled using extra constraints on predicates similar to those used in Lojban.

These extra constraints assign and use sub-types on objects that the agent
thinks about. The "room" refers to a finite number of objects for which
speech-acts can determine whether common goals that the agent tries to
achieve will fail.

In the view of The Room Hypothesis, common sense is closely linked to Zen
Rationality, an extension of instrumental rationality with the ability for
higher order reasoning about goals. Common sense is a way for a zen rational
agent to "factor out" common terms in its utility function into a background
theory of efficient higher order behavior.

This experiment tests the hypothesis structurally instead of using machine
learning, to derive which kind of constraints occur naturally.
"""

__version__ = "0.1.0"
