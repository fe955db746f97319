"""API client for the App Center build service."""

from urllib.parse import quote

import requests


class APIResponse:
    """Status code and decoded payload of one API call."""
    
    def __init__(self, status_code, data=None, text=''):
        self.status_code = status_code
        self.data = data
        self.text = text
    
    @property
    def ok(self):
        return self.status_code == 200
    
    def body_text(self):
        """Raw response body, used in failure messages."""
        return self.text
    
    def __repr__(self):
        return f"APIResponse(status={self.status_code})"


class APIClient:
    """HTTP client for the App Center API.
    
    Never raises on HTTP error statuses; callers decide which statuses are
    acceptable. Transport errors from ``requests`` propagate unchanged.
    """
    
    def __init__(self, base_url, auth_manager, config, debug=False, debug_logger=None, session=None):
        """Initialize the API client.
        
        Args:
            base_url (str): The base URL for API requests
            auth_manager (AuthManager): Authentication manager instance
            config (Config): Configuration instance
            debug (bool): Enable debug output
            debug_logger (DebugLogger, optional): Debug logger instance
            session (requests.Session, optional): Session to reuse
        """
        self.base_url = base_url.rstrip('/')
        self.auth = auth_manager
        self.config = config
        self.debug = debug
        self.logger = debug_logger
        self.session = session or requests.Session()
    
    @staticmethod
    def app_path(owner, app, *segments):
        """Build an ``/apps/{owner}/{app}/...`` path with quoted segments."""
        parts = ['apps', owner, app] + list(segments)
        return '/' + '/'.join(quote(str(part), safe='') for part in parts)
    
    def request(self, method, endpoint, json_data=None):
        """Make a single request without retries.
        
        Args:
            method (str): HTTP method
            endpoint (str): API endpoint path
            json_data (dict, optional): JSON body
            
        Returns:
            APIResponse: Status code and decoded payload
        """
        url = f"{self.base_url}{endpoint}"
        headers = self.auth.get_headers(with_body=json_data is not None)
        
        if self.logger:
            self.logger.log(f"  {method} {endpoint}")
        
        response = self.session.request(
            method,
            url,
            headers=headers,
            json=json_data,
            timeout=self.config.request_timeout
        )
        
        if self.logger:
            self.logger.log(f"    -> {response.status_code}")
        if self.debug and response.status_code >= 400:
            print(f"    {method} {endpoint} returned {response.status_code}: {response.text}")
        
        return APIResponse(response.status_code, self._decode(response), response.text)
    
    def get(self, endpoint):
        return self.request('GET', endpoint)
    
    def post(self, endpoint, json_data=None):
        return self.request('POST', endpoint, json_data=json_data)
    
    def patch(self, endpoint, json_data=None):
        return self.request('PATCH', endpoint, json_data=json_data)
    
    def delete(self, endpoint):
        return self.request('DELETE', endpoint)
    
    def close(self):
        """Close the underlying session."""
        self.session.close()
    
    @staticmethod
    def _decode(response):
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None
