"""Code review prompt."""

REVIEW_FUNCTION_DESCRIPTION = "Generate a summary and a code review based on the changes provided."

REVIEW_PROMPT_TEMPLATE = """Review the changes provided and provide feedback on the code.

```shell
{code_changes}
```
"""
