"""Build reset orchestration.

Runs the three stages strictly in order. Each stage runs only after the
previous one returned ``Ok``; the first ``Err`` ends the run with a failure
notice and nothing done so far is rolled back.
"""

from appcenter_reset.operations.build_cancellation import BuildCancellation
from appcenter_reset.operations.config_reset import ConfigReset
from appcenter_reset.operations.build_trigger import BuildTrigger
from appcenter_reset.models.result import Err, ErrorKind, StageError
from appcenter_reset.models.run import RunState

BUILD_ID_OUTPUT = 'build_id'
PUBLISH_STAGE = 'Publish-Result'


class BuildResetOrchestrator:
    """Cancel, reconfigure and rebuild one branch."""
    
    def __init__(self, api_client, reporter, stage_tracker=None, debug_logger=None):
        """Initialize the orchestrator.
        
        Args:
            api_client (APIClient): API client instance
            reporter: Object providing notify, publish and fail
            stage_tracker (StageTracker, optional): Prints stage banners
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.api_client = api_client
        self.reporter = reporter
        self.stage_tracker = stage_tracker
        self.logger = debug_logger
        
        # (state, banner, operation)
        self.stages = [
            (RunState.CANCELLING_IF_NEEDED, 'Step 1: Check if there is a build in progress',
             BuildCancellation(api_client, reporter, debug_logger)),
            (RunState.RESETTING_CONFIG, 'Step 2: Set build configuration',
             ConfigReset(api_client, reporter, debug_logger)),
            (RunState.TRIGGERING_BUILD, 'Step 3: Start build',
             BuildTrigger(api_client, reporter, debug_logger)),
        ]
    
    def run(self, run):
        """Execute every stage for the given OrchestrationRun.
        
        Args:
            run (OrchestrationRun): The run to execute; updated in place
            
        Returns:
            OrchestrationRun: The same run, in state SUCCEEDED or FAILED
        """
        self._log(f"Starting reset of {run.owner}/{run.app} branch {run.branch_name} "
                  f"from {run.reference_branch_name}")
        result = None
        
        for state, banner, operation in self.stages:
            run.advance(state)
            self._log(f"State: {state.value}")
            self._start_stage(banner)
            
            result = self._execute(operation, run)
            if not result.is_ok:
                return self._fail(run, result.error)
            
            if self.stage_tracker:
                self.stage_tracker.end_stage()
        
        # The last stage's output is the new build id
        build_id = result.value
        try:
            self.reporter.publish(BUILD_ID_OUTPUT, build_id)
        except Exception as e:
            return self._fail(run, StageError(
                ErrorKind.UNEXPECTED,
                PUBLISH_STAGE,
                detail=f"{type(e).__name__}: {e}"
            ))
        
        run.succeed(build_id)
        self._log(f"State: {run.state.value} (build {run.build_id})")
        return run
    
    def _execute(self, operation, run):
        try:
            return operation.execute(run)
        except Exception as e:
            return Err(StageError(
                ErrorKind.UNEXPECTED,
                operation.STAGE_NAME,
                detail=f"{type(e).__name__}: {e}"
            ))
    
    def _fail(self, run, error):
        run.fail(error)
        self._log(f"State: {run.state.value} ({error.kind.value} in {error.stage})")
        self.reporter.fail(error.message)
        return run
    
    def _start_stage(self, banner):
        if self.stage_tracker:
            self.stage_tracker.start_stage(banner)
        self.reporter.notify('')
        self.reporter.notify(f"🔄 {banner}")
    
    def _log(self, message):
        if self.logger:
            self.logger.log(message)
