"""
Error handling - one exception type for HTTP and network failures
"""
import logging

from restexec import (
    ClientConfig,
    HttpMethod,
    RequestsHttpClient,
    RestApiError,
    RestApiExecutor,
    TimeoutConfig,
    setup_logging,
)


def get(url):
    return (RestApiExecutor.new_request()
            .url(url)
            .method(HttpMethod.GET)
            .headers_done()
            .body_done()
            .build())


def main():
    logging.basicConfig(level=logging.INFO)
    setup_logging(logging.DEBUG)

    config = ClientConfig(timeout=TimeoutConfig(connect=2.0, sock_read=2.0))
    with RequestsHttpClient(config=config) as client:
        client.on('response', lambda r: print(f"  <- {r.status_code} {r.reason}"))

        for url in ("https://httpbin.org/status/404",
                    "https://httpbin.org/status/503",
                    "http://127.0.0.1:9/"):
            try:
                get(url).execute(client, str)
            except RestApiError as e:
                print(f"{url}: [{e.kind.value}] {e.error_code} - {e.message}")


if __name__ == "__main__":
    main()
