"""Build cancellation operation."""

from appcenter_reset.operations.base import Operation
from appcenter_reset.models.build import BranchBuild
from appcenter_reset.models.result import Ok, Err, ErrorKind, StageError


class BuildCancellation(Operation):
    """Cancel the newest build of a branch when it has not completed."""
    
    STAGE_NAME = 'Build-Cancellation'
    
    def execute(self, run):
        """Execute build cancellation.
        
        Returns:
            Ok: Carrying the cancelled BranchBuild, or None if nothing ran
            Err: FetchError or CancelError
        """
        builds_path = self.api_client.app_path(run.owner, run.app, 'branches', run.branch_name, 'builds')
        self.log(f"Fetching builds for branch {run.branch_name}...")
        
        response = self.api_client.get(builds_path)
        if not response.ok:
            return Err(StageError.from_response(ErrorKind.FETCH, self.STAGE_NAME, response))
        
        if not isinstance(response.data, list):
            raise ValueError(f"Unexpected build list payload: {response.text}")
        
        self.log(f"Retrieved {len(response.data)} builds")
        
        # Builds come back newest first
        latest = BranchBuild.from_dict(response.data[0]) if response.data else None
        if latest is None or latest.is_completed:
            self.notify('✅ No build in progress.')
            return Ok(None)
        
        self.log(f"Build {latest.id} is {latest.status}, cancelling")
        response = self.api_client.patch(
            self.api_client.app_path(run.owner, run.app, 'builds', latest.id),
            json_data={'status': 'cancelling'}
        )
        if not response.ok:
            return Err(StageError.from_response(ErrorKind.CANCEL, self.STAGE_NAME, response))
        
        self.notify('✅ Current build stopped.')
        return Ok(latest)
