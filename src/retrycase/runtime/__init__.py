"""Runtime layer: retry execution and observability.

Import from the subpackages (retrycase.runtime.retry,
retrycase.runtime.observability) or from the top-level retrycase package.
"""
