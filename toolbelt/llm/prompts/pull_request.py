"""Pull request title and description prompt."""

PR_FUNCTION_DESCRIPTION = (
    "Generate a title and description for a pull request based on the commit messages "
    "and the changes in the current branch compared to the target branch."
)

PR_PROMPT_TEMPLATE = """I need you to help me write a pull request for the changes in my branch. \
I need a title for the pull request that is concise and less than 50 characters. \
The title must be in conventional commit message format starting with `feat:`, `fix:`, `refactor:`, etc. \
I also need a description for the pull request. \
Fill out the provided template for the pull request description based on the provided changes and commit messages.

For the description you should analyze the commits and generate a summary. Do not just list the commit messages from the branch.

Here is the template:

```markdown
## Why?

<-- BRIEF PARAGRAPH(S) DESCRIBING PURPOSE OF THE CHANGES -->


## What Changed?

<-- BULLETED LIST SUMMARIZING THE CHANGES MADE IN THE PR -->

```

---

Here are the commit messages for the PR:

```shell

{commit_messages}

```

---

Here are the code changes for the PR:

```shell

{code_changes}

```
"""
