"""Display-agnostic speed reader core.

WHY: The playback state machine is the only part with real state and
timing; keeping it free of any GUI toolkit makes it testable.

HOW: tokenizer.py splits text into words, loader.py reads dropped files
off the frame loop, ingestion.py tracks drags and the pending load,
playback.py advances the position, state.py derives the display mode,
render.py turns state into draw intents, and reader.py wires them into
the SpeedReader context object.

RULES:
- No module here imports tkinter or touches pixels
- Errors from loading never escape a frame
"""
