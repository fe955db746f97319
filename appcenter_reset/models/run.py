"""Orchestration run model."""

from enum import Enum


class RunState(Enum):
    INIT = 'init'
    CANCELLING_IF_NEEDED = 'cancelling_if_needed'
    RESETTING_CONFIG = 'resetting_config'
    TRIGGERING_BUILD = 'triggering_build'
    SUCCEEDED = 'succeeded'
    FAILED = 'failed'


TERMINAL_STATES = (RunState.SUCCEEDED, RunState.FAILED)


class OrchestrationRun:
    """A single reset-and-restart execution for one branch.
    
    Holds the caller supplied parameters and, once finished, exactly one
    outcome: a build id on success or a failure message.
    """
    
    def __init__(self, token, owner, app, branch_name, reference_branch_name):
        """Initialize an OrchestrationRun.
        
        Args:
            token (str): App Center API token
            owner (str): App owner (user or organization name)
            app (str): App name
            branch_name (str): Branch to reset and rebuild
            reference_branch_name (str): Branch whose configuration is cloned
        """
        self.token = token
        self.owner = owner
        self.app = app
        self.branch_name = branch_name
        self.reference_branch_name = reference_branch_name
        self.state = RunState.INIT
        self.build_id = None
        self.error = None
    
    @classmethod
    def from_config(cls, config):
        """Create a run from a validated Config."""
        return cls(
            token=config.token,
            owner=config.owner,
            app=config.app,
            branch_name=config.branch_name,
            reference_branch_name=config.reference_branch_name
        )
    
    def advance(self, state):
        """Move to the next active state."""
        if self.state in TERMINAL_STATES:
            raise RuntimeError(f"Run already finished in state {self.state.value}")
        self.state = state
    
    def succeed(self, build_id):
        self.advance(RunState.SUCCEEDED)
        self.build_id = build_id
    
    def fail(self, error):
        self.advance(RunState.FAILED)
        self.error = error
    
    @property
    def succeeded(self):
        return self.state == RunState.SUCCEEDED
    
    @property
    def failure_message(self):
        return self.error.message if self.error else None
    
    def __repr__(self):
        return f"OrchestrationRun(branch={self.branch_name}, state={self.state.value})"
