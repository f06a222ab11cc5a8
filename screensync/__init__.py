"""
ScreenSync - screenplay element classification and Final Draft export.

Turns free-form screenplay text into classified elements (scene heading,
action, character, dialogue, parenthetical, transition) and serializes
them into Final Draft (.fdx) XML: line classification → document model →
FDX serialization → storage.
"""

__version__ = "0.1.0"
