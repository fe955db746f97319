class Operation:
    """Base class for the stages of the reset flow."""
    
    STAGE_NAME = None
    
    def __init__(self, api_client, reporter=None, debug_logger=None):
        """Initialize the operation.
        
        Args:
            api_client (APIClient): API client instance
            reporter (ConsoleReporter, optional): Receives progress notices
            debug_logger (DebugLogger, optional): Debug logger instance
        """
        self.api_client = api_client
        self.reporter = reporter
        self.logger = debug_logger

    def execute(self, run):
        """Execute the operation for an OrchestrationRun.
        
        This method should be overridden by specific operations and return
        an ``Ok`` or ``Err`` result.
        """
        raise NotImplementedError("Operation must implement execute method")

    def notify(self, message):
        if self.reporter:
            self.reporter.notify(message)

    def log(self, message):
        if self.logger:
            self.logger.log(message)
