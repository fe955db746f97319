import os
from dotenv import load_dotenv

DEFAULT_BASE_URL = 'https://api.appcenter.ms/v0.1'


class Config:
    def __init__(self):
        """Initialize configuration with default values."""
        # Authentication
        self.token = None
        
        # Target app and branches
        self.owner = None
        self.app = None
        self.branch_name = None
        self.reference_branch_name = None
        
        # General
        self.debug = False
        
        # API settings
        self.base_url = DEFAULT_BASE_URL
        self.request_timeout = None  # No timeout: a hung call blocks the run
        
        # Logging
        self.log_file = None
        
        # CI step output file (GitHub Actions style)
        self.output_file = None

    @classmethod
    def from_env(cls, env_file='.env'):
        """Create configuration from environment variables.
        
        Args:
            env_file (str): Path to environment file (default: '.env')
        """
        load_dotenv(env_file)  # Load specified .env file if it exists
        
        config = cls()
        config.token = os.getenv('APPCENTER_TOKEN')
        config.owner = os.getenv('APPCENTER_USER')
        config.app = os.getenv('APPCENTER_APP')
        config.branch_name = os.getenv('APPCENTER_BRANCH')
        config.reference_branch_name = os.getenv('APPCENTER_SETTINGS_BRANCH')
        config.debug = os.getenv('APPCENTER_DEBUG', '').lower() == 'true'
        config.log_file = os.getenv('APPCENTER_LOG_FILE')
        config.output_file = os.getenv('GITHUB_OUTPUT')
        
        # Optional environment overrides
        if os.getenv('APPCENTER_BASE_URL'):
            config.base_url = os.getenv('APPCENTER_BASE_URL')
        if os.getenv('APPCENTER_REQUEST_TIMEOUT'):
            config.request_timeout = float(os.getenv('APPCENTER_REQUEST_TIMEOUT'))
            
        return config

    def apply_args(self, args):
        """Override values with command line arguments that were provided.
        
        Args:
            args: Parsed command line arguments
        """
        overrides = {
            'token': 'token',
            'owner': 'owner',
            'app': 'app',
            'branch': 'branch_name',
            'settings_branch': 'reference_branch_name',
            'base_url': 'base_url',
            'timeout': 'request_timeout',
            'log_file': 'log_file',
        }
        for arg_name, attr in overrides.items():
            value = getattr(args, arg_name, None)
            if value:
                setattr(self, attr, value)
        if getattr(args, 'debug', False):
            self.debug = True
        return self

    def validate(self):
        """Validate the configuration.
        
        Returns:
            tuple: (bool, str) - (is_valid, error_message)
        """
        if not self.token:
            return False, "API token is required"
        if not self.owner:
            return False, "App owner is required"
        if not self.app:
            return False, "App name is required"
        if not self.branch_name:
            return False, "Branch name is required"
        if not self.reference_branch_name:
            return False, "Settings branch name is required"
        if not self.base_url:
            return False, "Base URL is required"
        return True, None
