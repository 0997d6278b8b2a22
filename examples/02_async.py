"""
Async usage - same request through aiohttp
"""
import asyncio

from restexec import AiohttpHttpClient, HttpMethod, RestApiError, RestApiExecutor


async def main():
    executor = (RestApiExecutor.new_request()
                .url("https://httpbin.org/get")
                .method(HttpMethod.GET)
                .add_header("Accept", "application/json")
                .headers_done()
                .body_done()
                .build())

    async with AiohttpHttpClient() as client:
        try:
            response = await executor.execute_async(client, dict)
            print(f"Status: {response.status_code}")
            print(f"Headers seen by server: {response.body['headers']}")
        except RestApiError as e:
            print(f"API call failed: Error Code {e.error_code} - {e.message}")


if __name__ == "__main__":
    asyncio.run(main())
