"""
AI Module - The structured generation gateway behind every CreatorTune tool.

Each tool (channel audit, script generator, A/B tester, ...) is one
operation: typed inputs go in, a prompt and response schema are built, Gemini
is called once in JSON mode, and the text that comes back is validated into a
typed result.

Module Structure:
================
- errors.py: The four failure kinds callers can observe
- localization.py: Appends the translate-string-values instruction
- multimodal.py: Image validation and request envelopes
- schemas/: Result models (and the Gemini schema derived from them)
- operations/: Input models and the operation registry
- prompts/: Prompt builders, one per operation
- providers/: Credential guard and the Gemini invoker
- decoder.py: Raw text to result model
- gateway.py: Runs an operation end to end
- monitoring/: Structured JSON logging
"""
