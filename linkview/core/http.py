import httpx

def async_client(timeout=None, verify=True, follow_redirects=True):
    return httpx.AsyncClient(
        timeout=timeout, verify=verify, follow_redirects=follow_redirects
    )
