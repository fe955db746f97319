"""Branch build configuration model."""

class BranchConfig:
    """Represents a branch build configuration cloned from another branch."""
    
    def __init__(self, source_branch, clone_from_branch):
        """Initialize a BranchConfig.
        
        Args:
            source_branch (str): Branch whose configuration is replaced
            clone_from_branch (str): Reference branch used as the template
        """
        self.source_branch = source_branch
        self.clone_from_branch = clone_from_branch
    
    def to_payload(self):
        """Request body for the create-configuration call."""
        return {'cloneFromBranch': self.clone_from_branch}
    
    def __eq__(self, other):
        if not isinstance(other, BranchConfig):
            return NotImplemented
        return (self.source_branch, self.clone_from_branch) == (other.source_branch, other.clone_from_branch)
    
    def __repr__(self):
        return f"BranchConfig(branch={self.source_branch}, clone_from={self.clone_from_branch})"
