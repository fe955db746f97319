"""Build trigger operation."""

from appcenter_reset.operations.base import Operation
from appcenter_reset.models.result import Ok, Err, ErrorKind, StageError


class BuildTrigger(Operation):
    """Queue a new non-debug build for a branch."""
    
    STAGE_NAME = 'Build-Trigger'
    
    def execute(self, run):
        """Execute the build trigger.
        
        Returns:
            Ok: Carrying the new build id as a string
            Err: BuildTriggerError
        """
        response = self.api_client.post(
            self.api_client.app_path(run.owner, run.app, 'branches', run.branch_name, 'builds'),
            json_data={'debug': False}
        )
        if not response.ok:
            return Err(StageError.from_response(ErrorKind.BUILD_TRIGGER, self.STAGE_NAME, response))
        
        build_id = response.data.get('id') if isinstance(response.data, dict) else None
        if build_id is None:
            return Err(StageError(
                ErrorKind.BUILD_TRIGGER,
                self.STAGE_NAME,
                status=response.status_code,
                body=response.body_text(),
                detail='Response has no build id'
            ))
        
        build_id = str(build_id)
        self.notify(f"✅ Build started successfully with id: {build_id}.")
        return Ok(build_id)
