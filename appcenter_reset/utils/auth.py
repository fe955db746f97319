class AuthManager:
    def __init__(self, token):
        """Initialize the authentication manager.
        
        Args:
            token (str): App Center API token
        """
        self.token = token

    def get_headers(self, with_body=False):
        """Get headers with the API token for App Center requests.
        
        Args:
            with_body (bool): Add a JSON Content-Type for requests carrying a body
        """
        headers = {
            'accept': 'application/json',
            'X-API-Token': self.token
        }
        if with_body:
            headers['Content-Type'] = 'application/json'
        return headers
