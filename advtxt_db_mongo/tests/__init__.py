"""Test suite for the advtxt MongoDB data store.

Organized into three categories:

1. core/: Unit tests for models, errors, ports and the callback bridge
   - No driver dependency, fast execution

2. adapters/: Tests for the MongoDB adapter
   - Driver mocked with unittest.mock
   - Live integration tests run only when MONGODB_TEST_URI is set

3. fakes/: Port implementations for testing
   - In-memory FakeDataStorePort
"""
