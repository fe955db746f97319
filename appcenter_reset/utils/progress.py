"""Progress tracking utilities."""

from tqdm import tqdm
import sys

class ProgressTracker:
    """Step progress bar for the reset flow."""
    
    def __init__(self, enabled=True):
        """Initialize the progress tracker.
        
        Args:
            enabled (bool): Draw a progress bar at all
        """
        self.enabled = enabled
        self.current_bar = None
    
    def create_bar(self, total, description, unit='steps'):
        """Create a new progress bar.
        
        Args:
            total (int): Total number of steps
            description (str): Description of the operation
            unit (str): Unit name for steps
            
        Returns:
            tqdm: Progress bar instance, or None when disabled
        """
        self.close()
        if not self.enabled:
            return None
        
        self.current_bar = tqdm(
            total=total,
            desc=description,
            unit=unit,
            ncols=100,
            file=sys.stdout
        )
        return self.current_bar
    
    def update(self, n=1):
        if self.current_bar:
            self.current_bar.update(n)
    
    def close(self):
        """Close the current progress bar."""
        if self.current_bar:
            self.current_bar.close()
            self.current_bar = None
    
    def print(self, message):
        """Print a message without interfering with progress bar.
        
        Args:
            message (str): Message to print
        """
        if self.current_bar:
            self.current_bar.write(message)
        else:
            print(message)


class StageTracker:
    """Track the stages of one run."""
    
    def __init__(self, progress=None):
        """Initialize the stage tracker.
        
        Args:
            progress (ProgressTracker, optional): Advanced once per finished stage
        """
        self.progress = progress
        self.stages = []
    
    def start_stage(self, stage_name):
        """Record the start of a new stage."""
        self.stages.append(stage_name)
    
    def end_stage(self):
        """Mark the current stage as done."""
        if self.progress:
            self.progress.update(1)
    