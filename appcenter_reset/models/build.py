"""Branch build data model."""

COMPLETED_STATUS = 'completed'


class BranchBuild:
    """Represents a build record returned for an App Center branch."""
    
    def __init__(self, build_id, status, build_number=None, source_branch=None, queue_time=None):
        """Initialize a BranchBuild.
        
        Args:
            build_id (str): The build ID
            status (str): Build status (notStarted, inProgress, completed, ...)
            build_number (str, optional): Human readable build number
            source_branch (str, optional): Branch the build belongs to
            queue_time (str, optional): Queue timestamp
        """
        self.id = build_id
        self.status = status
        self.build_number = build_number
        self.source_branch = source_branch
        self.queue_time = queue_time
    
    @property
    def is_completed(self):
        """Whether the build has reached the completed status."""
        return self.status == COMPLETED_STATUS
    
    @classmethod
    def from_dict(cls, data):
        """Create BranchBuild from an API build record."""
        return cls(
            build_id=str(data['id']),
            status=data.get('status'),
            build_number=data.get('buildNumber'),
            source_branch=data.get('sourceBranch'),
            queue_time=data.get('queueTime')
        )
    
    def __repr__(self):
        return f"BranchBuild(id={self.id}, status={self.status})"
