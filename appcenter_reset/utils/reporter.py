"""Run reporting: progress notices, published outputs and the failure notice."""

import sys


class ConsoleReporter:
    """Reports run progress to the console, the debug log and CI outputs.
    
    ``publish`` also appends ``name=value`` to the step output file when one
    is configured (the file named by ``GITHUB_OUTPUT`` in GitHub Actions).
    """
    
    def __init__(self, progress=None, debug_logger=None, output_file=None):
        """Initialize the reporter.
        
        Args:
            progress (ProgressTracker, optional): Progress bar to print through
            debug_logger (DebugLogger, optional): Debug logger instance
            output_file (str, optional): Step output file to append to
        """
        self.progress = progress
        self.logger = debug_logger
        self.output_file = output_file
        self.outputs = {}
        self.failure = None
    
    def notify(self, message):
        """Emit an informational progress notice."""
        if self.progress:
            self.progress.print(message)
        else:
            print(message)
        if self.logger:
            self.logger.log(f"INFO: {message}")
    
    def publish(self, name, value):
        """Publish a named run output."""
        if self.output_file:
            with open(self.output_file, 'a', encoding='utf-8') as f:
                f.write(f"{name}={value}\n")
        self.outputs[name] = value
        if self.logger:
            self.logger.log(f"OUTPUT: {name}={value}")
    
    def fail(self, message):
        """Emit the terminal failure notice."""
        self.failure = message
        if self.progress:
            self.progress.close()
        print(message, file=sys.stderr)
        if self.logger:
            self.logger.log(f"FAILED: {message}")
