"""Exception types raised by the crew pipeline and its completion client."""


class ValidationError(ValueError):
    """The request was rejected before any completion call was made."""


class ServiceError(Exception):
    """A completion call did not succeed.

    status_code is None when the request never produced an HTTP response
    (connection refused, timeout).
    """

    def __init__(self, status_code: int | None, body: object = None):
        self.status_code = status_code
        self.body = body
        label = status_code if status_code is not None else "no response"
        super().__init__(f"Completion service error: {label}")


class PipelineError(Exception):
    """A stage of the crew pipeline failed; the run produced nothing."""


class PersonaStageError(PipelineError):
    def __init__(self, persona: str, cause: Exception):
        self.persona = persona
        self.cause = cause
        super().__init__(f"{persona} failed to respond: {cause}")


class SynthesisStageError(PipelineError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Code generation failed: {cause}")
