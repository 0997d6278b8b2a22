"""
Basic usage - build a POST request and execute it with requests
"""
from restexec import HttpMethod, RequestsHttpClient, RestApiError, RestApiExecutor


def main():
    executor = (RestApiExecutor.new_request()
                .url("https://httpbin.org/post")
                .method(HttpMethod.POST)
                .add_header("Content-Type", "application/json")
                .headers_done()
                .set_body({"key": "value"})
                .body_done()
                .build())

    with RequestsHttpClient() as client:
        try:
            response = executor.execute(client, str)
            print(response.body)
        except RestApiError as e:
            print(f"API call failed: Error Code {e.error_code} - {e.message}")


if __name__ == "__main__":
    main()
