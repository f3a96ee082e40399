"""Generation hooks for customizing transformer generation.

Pre-generation hooks see the operation definitions collected from the
documents and may drop or reorder them; post-generation hooks transform the
rendered file before it is written.

Example usage:
    from gql_tsgen.core.hooks import PostGenerateHook, PreGenerateHook

    class SkipInternalOperations(PreGenerateHook):
        def pre_generate(self, operations):
            return [op for op in operations if not op.name.value.startswith("Internal")]

    class AddLicenseHeader(PostGenerateHook):
        def post_generate(self, filename, content):
            return "// Copyright 2024 My Company\\n\\n" + content
"""

from typing import Protocol, runtime_checkable

from graphql import OperationDefinitionNode


@runtime_checkable
class PreGenerateHook(Protocol):
    """Protocol for pre-generation hooks."""

    def pre_generate(self, operations: list[OperationDefinitionNode]) -> list[OperationDefinitionNode]:
        """Called with all operations before any code is generated.

        Args:
            operations: Operation definitions in document order

        Returns:
            The (possibly filtered) operations to generate code for
        """
        ...


@runtime_checkable
class PostGenerateHook(Protocol):
    """Protocol for post-generation hooks.

    Example:
        class FormatWithPrettier(PostGenerateHook):
            def post_generate(self, filename: str, content: str) -> str:
                return run_prettier(filename, content)
    """

    def post_generate(self, filename: str, content: str) -> str:
        """Called with the rendered file.

        Args:
            filename: The name of the generated file (e.g., "transformers.ts")
            content: The generated code content

        Returns:
            The (possibly transformed) code to write
        """
        ...


class AddHeaderHook:
    """Built-in hook to add a header to generated files.

    Example:
        hook = AddHeaderHook("/* eslint-disable */")
    """

    def __init__(self, header: str):
        self.header = header

    def post_generate(self, _filename: str, content: str) -> str:
        """Add a header to the beginning of the file."""
        if not self.header.endswith("\n"):
            header = self.header + "\n\n"
        else:
            header = self.header + "\n"
        return header + content


class FilterOperationsHook:
    """Built-in hook to filter operations by name prefix/suffix.

    Anonymous operations are never filtered here.

    Example:
        hook = FilterOperationsHook(exclude_prefix="Internal")
    """

    def __init__(
        self,
        exclude_prefix: str | None = None,
        exclude_suffix: str | None = None,
        include_prefix: str | None = None,
        include_suffix: str | None = None,
    ):
        self.exclude_prefix = exclude_prefix
        self.exclude_suffix = exclude_suffix
        self.include_prefix = include_prefix
        self.include_suffix = include_suffix

    def _should_include(self, name: str) -> bool:
        """Check if an operation should be included."""
        if self.exclude_prefix and name.startswith(self.exclude_prefix):
            return False
        if self.exclude_suffix and name.endswith(self.exclude_suffix):
            return False
        if self.include_prefix and not name.startswith(self.include_prefix):
            return False
        if self.include_suffix and not name.endswith(self.include_suffix):
            return False
        return True

    def pre_generate(self, operations: list[OperationDefinitionNode]) -> list[OperationDefinitionNode]:
        return [op for op in operations if op.name is None or self._should_include(op.name.value)]


class HookRunner:
    """Runs a collection of hooks in order."""

    def __init__(self):
        self.pre_hooks: list[PreGenerateHook] = []
        self.post_hooks: list[PostGenerateHook] = []

    def add_pre_hook(self, hook: PreGenerateHook):
        """Add a pre-generation hook."""
        self.pre_hooks.append(hook)

    def add_post_hook(self, hook: PostGenerateHook):
        """Add a post-generation hook."""
        self.post_hooks.append(hook)

    def run_pre_hooks(self, operations: list[OperationDefinitionNode]) -> list[OperationDefinitionNode]:
        """Run all pre-generation hooks in order."""
        for hook in self.pre_hooks:
            operations = hook.pre_generate(operations)
        return operations

    def run_post_hooks(self, filename: str, content: str) -> str:
        """Run all post-generation hooks in order."""
        for hook in self.post_hooks:
            content = hook.post_generate(filename, content)
        return content
