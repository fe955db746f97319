"""Branch configuration reset operation."""

from appcenter_reset.operations.base import Operation
from appcenter_reset.models.branch_config import BranchConfig
from appcenter_reset.models.result import Ok, Err, ErrorKind, StageError

CONFIG_FOUND = 200
CONFIG_NOT_FOUND = 404


class ConfigReset(Operation):
    """Replace a branch's build configuration with a clone of another branch's."""
    
    STAGE_NAME = 'Configuration-Reset'
    
    def execute(self, run):
        """Execute the configuration reset.
        
        The existing configuration, if any, is deleted before the new one is
        created; the service has no upsert.
        
        Returns:
            Ok: Carrying the new BranchConfig
            Err: ConfigLookupError, ConfigDeleteError or ConfigCreateError
        """
        config_path = self.api_client.app_path(run.owner, run.app, 'branches', run.branch_name, 'config')
        
        response = self.api_client.get(config_path)
        if response.status_code not in (CONFIG_FOUND, CONFIG_NOT_FOUND):
            return Err(StageError.from_response(ErrorKind.CONFIG_LOOKUP, self.STAGE_NAME, response))
        
        if response.status_code == CONFIG_FOUND:
            self.log(f"Branch {run.branch_name} has a configuration, deleting it")
            response = self.api_client.delete(config_path)
            if not response.ok:
                return Err(StageError.from_response(ErrorKind.CONFIG_DELETE, self.STAGE_NAME, response))
            self.notify('✅ Clean previous build configuration.')
        else:
            self.log(f"Branch {run.branch_name} has no configuration")
        
        branch_config = BranchConfig(run.branch_name, run.reference_branch_name)
        response = self.api_client.post(config_path, json_data=branch_config.to_payload())
        if not response.ok:
            return Err(StageError.from_response(ErrorKind.CONFIG_CREATE, self.STAGE_NAME, response))
        
        self.notify('✅ Build configuration set.')
        return Ok(branch_config)
