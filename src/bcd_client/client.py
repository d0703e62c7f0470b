# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""High-level async client for the Better Call Dev API.

Every method corresponds to one API endpoint. Results are normalized:

- the decoded payload on success,
- ``None`` or ``{}`` where the endpoint documents 204 as "nothing found",
- ``CANCELED`` when a newer call in the same cancellation group superseded it.

Failures raise ``RequestFailedError`` (or its ``UnauthorizedError`` and
``TransportError`` subclasses).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from bcd_client.api import Client
from bcd_client.api import account, bigmap, contract, misc, profile, stats
from bcd_client.api.auth import CredentialProvider, env_credential
from bcd_client.api.cancellation import CancellationRegistry
from bcd_client.api.params import without_empty
from bcd_client.config import ClientSettings

Json = Any


class BetterCallClient:
    """Async client for the Better Call Dev explorer API.

    Example:
        ```python
        async with BetterCallClient("https://api.better-call.dev/v1") as client:
            head = await client.get_head()
            found = await client.search("tzBTC", networks=["mainnet"])

            # Results of superseded calls are the CANCELED sentinel
            if found is CANCELED:
                return
        ```

    For the low-level endpoint descriptors, access the ``.api`` property and
    the modules under ``bcd_client.api``.
    """

    def __init__(
        self,
        url: str | None = None,
        *,
        timeout: float | None = None,
        credentials: CredentialProvider | None = None,
        registry: CancellationRegistry | None = None,
        settings: ClientSettings | None = None,
        headers: dict[str, str] | None = None,
    ):
        """Initialize the client.

        Args:
            url: Base URL of the API; overrides ``settings.base_url``
            timeout: Request timeout in seconds; overrides ``settings.timeout``
            credentials: Callable returning the current session token or None.
                Defaults to reading ``settings.credential_env`` on every call.
            registry: Cancellation registry shared by cancellable endpoints.
                A fresh one is created when omitted.
            settings: Client settings, defaults to ``ClientSettings()``
            headers: Optional additional headers to include in requests
        """
        self._settings = settings or ClientSettings()
        base_url = (url or self._settings.base_url).rstrip("/")
        self._page_size = self._settings.page_size
        self._registry = registry if registry is not None else CancellationRegistry()
        self._client = Client(
            base_url=base_url,
            timeout=timeout if timeout is not None else self._settings.timeout,
            headers=headers,
            registry=self._registry,
            credentials=credentials or env_credential(self._settings.credential_env),
            auth_scheme=self._settings.auth_scheme,
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> BetterCallClient:
        """Create a client configured from ``BCD_*`` environment variables."""
        return cls(settings=ClientSettings.from_env(), **kwargs)

    @property
    def url(self) -> str:
        """Base URL of the API."""
        return self._client.base_url

    @property
    def api(self) -> Client:
        """Access the low-level transport client."""
        return self._client

    @property
    def registry(self) -> CancellationRegistry:
        return self._registry

    def cancel_requests(self) -> int:
        """Cancel every outstanding cancellable request (e.g. on navigation).

        Returns:
            Number of requests canceled.
        """
        return self._registry.cancel_all()

    async def close(self) -> None:
        """Cancel outstanding requests and release HTTP resources."""
        await self._client.aclose()

    async def __aenter__(self) -> BetterCallClient:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    def _size(self, size: int | None) -> int:
        return self._page_size if size is None else size

    # =========================================================================
    # Global endpoints
    # =========================================================================

    async def get_config(self) -> Json:
        return await misc.get_config.asyncio(client=self._client)

    async def get_head(self) -> Json:
        """Head block of every indexed network."""
        return await misc.get_head.asyncio(client=self._client)

    async def search(
        self,
        text: str,
        *,
        indices: Sequence[str] = (),
        offset: int = 0,
        networks: Sequence[str] = (),
        languages: Sequence[str] = (),
        time: Mapping[str, Any] | None = None,
        group: int = 0,
    ) -> Json:
        """Full-text search.

        All search calls share one cancellation slot, so a new query
        supersedes the previous keystroke's request.

        Args:
            text: Query text
            indices: Indices to search in
            offset: Number of results to skip
            networks: Networks to search in
            languages: Contract languages to filter by
            time: Extra time bounds (e.g. ``{"s": ..., "e": ...}``); empty bounds are dropped
            group: Negative disables result grouping

        Returns:
            Search results, or ``CANCELED``
        """
        return await misc.search.asyncio(
            client=self._client,
            text=text,
            indices=indices,
            offset=offset,
            networks=networks,
            languages=languages,
            group=group,
            extra_query=without_empty(time),
        )

    async def get_random_contract(self, network: str | None = None) -> Json:
        """Pick a random contract.

        Invalidates every outstanding cancellable request first.
        """
        self._registry.cancel_all()
        return await misc.pick_random.asyncio(client=self._client, network=network)

    async def prepare_to_fork(self, data: Mapping[str, Any]) -> Json:
        return await misc.prepare_to_fork.asyncio(client=self._client, body=dict(data))

    async def get_diff(self, query: Mapping[str, Any]) -> Json:
        return await misc.get_diff.asyncio(client=self._client, body=dict(query))

    async def get_projects(self) -> Json:
        return await misc.get_projects.asyncio(client=self._client)

    async def get_opg(self, hash: str) -> Json:
        """Operation group by hash, mempool included."""
        return await misc.get_opg.asyncio(client=self._client, hash=hash)

    async def get_error_location(self, operation_id: int) -> Json:
        return await misc.get_error_location.asyncio(
            client=self._client, operation_id=operation_id
        )

    async def get_contract_by_slug(self, slug: str) -> Json:
        return await misc.get_contract_by_slug.asyncio(client=self._client, slug=slug)

    async def get_dapps(self) -> Json:
        return await misc.get_dapps.asyncio(client=self._client)

    async def get_dapp(self, slug: str) -> Json:
        return await misc.get_dapp.asyncio(client=self._client, slug=slug)

    async def list_domains(self, network: str, offset: int = 0, size: int | None = None) -> Json:
        return await misc.list_domains.asyncio(
            client=self._client, network=network, offset=offset, size=self._size(size)
        )

    async def resolve_domain(self, network: str, address: str) -> Json:
        """Reverse-resolve an address to its domain.

        Returns:
            Domain record, or ``{}`` when the address has none
        """
        return await misc.resolve_domain.asyncio(
            client=self._client, network=network, address=address
        )

    # =========================================================================
    # Contract endpoints
    # =========================================================================

    async def get_contract(self, network: str, address: str) -> Json:
        """Contract summary; personalized when a session token is available."""
        return await contract.get_contract.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_same_contracts(self, network: str, address: str, offset: int = 0) -> Json:
        return await contract.get_same_contracts.asyncio(
            client=self._client, network=network, address=address, offset=offset
        )

    async def get_similar_contracts(self, network: str, address: str, offset: int = 0) -> Json:
        return await contract.get_similar_contracts.asyncio(
            client=self._client, network=network, address=address, offset=offset
        )

    async def get_contract_operations(
        self,
        network: str,
        address: str,
        *,
        last_id: str = "",
        from_: int = 0,
        to: int = 0,
        statuses: Sequence[str] = (),
        entrypoints: Sequence[str] = (),
        with_storage_diff: bool = True,
    ) -> Json:
        """Operations of a contract.

        Args:
            network: Network name
            address: Contract address
            last_id: Cursor returned by the previous page
            from_: Lower timestamp bound, 0 for none
            to: Upper timestamp bound, 0 for none
            statuses: Status filter; selecting all four statuses means no filter
            entrypoints: Entrypoint filter
            with_storage_diff: Include storage diffs

        Returns:
            Page of operations, or ``CANCELED``
        """
        return await contract.get_contract_operations.asyncio(
            client=self._client,
            network=network,
            address=address,
            last_id=last_id,
            from_=from_,
            to=to,
            statuses=statuses,
            entrypoints=entrypoints,
            with_storage_diff=with_storage_diff,
        )

    async def get_contract_code(
        self, network: str, address: str, protocol: str = "", level: int = 0
    ) -> Json:
        return await contract.get_contract_code.asyncio(
            client=self._client,
            network=network,
            address=address,
            protocol=protocol,
            level=level,
        )

    async def get_contract_migrations(self, network: str, address: str) -> Json:
        return await contract.get_contract_migrations.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_contract_tokens(
        self, network: str, address: str, offset: int = 0, size: int | None = None
    ) -> Json:
        return await contract.get_contract_tokens.asyncio(
            client=self._client,
            network=network,
            address=address,
            offset=offset,
            size=self._size(size),
        )

    async def get_contract_tokens_count(self, network: str, address: str) -> Json:
        return await contract.get_contract_tokens_count.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_contract_transfers(
        self,
        network: str,
        address: str,
        token_id: int = -1,
        size: int | None = None,
        offset: int = 0,
    ) -> Json:
        return await contract.get_contract_transfers.asyncio(
            client=self._client,
            network=network,
            address=address,
            token_id=token_id,
            size=self._size(size),
            offset=offset,
        )

    async def get_contract_entrypoints(self, network: str, address: str) -> Json:
        return await contract.get_contract_entrypoints.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_contract_entrypoint_data(
        self, network: str, address: str, name: str, data: Any, format: str = ""
    ) -> str:
        """Build Michelson parameters for an entrypoint call.

        Returns:
            The raw response body text
        """
        return await contract.get_contract_entrypoint_data.asyncio(
            client=self._client,
            network=network,
            address=address,
            name=name,
            data=data,
            format=format,
        )

    async def get_contract_entrypoint_trace(
        self,
        network: str,
        address: str,
        name: str,
        data: Any,
        source: str | None = None,
        amount: int | str | None = None,
    ) -> Json:
        """Simulate an entrypoint call.

        With a ``source`` the operation is run against the node, otherwise it is
        traced. Both variants share one cancellation slot.
        """
        endpoint = contract.run_operation if source else contract.trace_entrypoint
        return await endpoint.asyncio(
            client=self._client,
            network=network,
            address=address,
            name=name,
            data=data,
            source=source,
            amount=amount,
        )

    async def get_contract_entrypoint_schema(
        self, network: str, address: str, entrypoint: str, fill_type: str = "empty"
    ) -> Json:
        return await contract.get_contract_entrypoint_schema.asyncio(
            client=self._client,
            network=network,
            address=address,
            fill_type=fill_type,
            entrypoint=entrypoint,
        )

    async def get_contract_storage(
        self, network: str, address: str, level: int | None = None
    ) -> Json:
        return await contract.get_contract_storage.asyncio(
            client=self._client, network=network, address=address, level=level
        )

    async def get_contract_storage_raw(
        self, network: str, address: str, level: int | None = None
    ) -> Json:
        return await contract.get_contract_storage_raw.asyncio(
            client=self._client, network=network, address=address, level=level
        )

    async def get_contract_storage_rich(
        self, network: str, address: str, level: int | None = None
    ) -> Json:
        return await contract.get_contract_storage_rich.asyncio(
            client=self._client, network=network, address=address, level=level
        )

    async def get_contract_storage_schema(
        self, network: str, address: str, fill_type: str = "empty"
    ) -> Json:
        return await contract.get_contract_storage_schema.asyncio(
            client=self._client, network=network, address=address, fill_type=fill_type
        )

    async def get_contract_mempool(self, network: str, address: str) -> Json:
        return await contract.get_contract_mempool.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_metadata_views_schema(self, network: str, address: str) -> Json:
        return await contract.get_metadata_views_schema.asyncio(
            client=self._client, network=network, address=address
        )

    async def execute_metadata_view(
        self, network: str, address: str, data: Mapping[str, Any]
    ) -> Json:
        return await contract.execute_metadata_view.asyncio(
            client=self._client, network=network, address=address, body=dict(data)
        )

    async def get_token_holders_list(self, network: str, address: str, token_id: int) -> Json:
        return await contract.get_token_holders_list.asyncio(
            client=self._client, network=network, address=address, token_id=token_id
        )

    # =========================================================================
    # Account endpoints
    # =========================================================================

    async def get_account_info(self, network: str, address: str) -> Json:
        return await account.get_account_info.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_account_token_balances(
        self, network: str, address: str, offset: int = 0, size: int | None = None
    ) -> Json:
        return await account.get_account_token_balances.asyncio(
            client=self._client,
            network=network,
            address=address,
            offset=offset,
            size=self._size(size),
        )

    async def get_account_metadata(self, network: str, address: str) -> Json:
        """Off-chain metadata of an account.

        Returns:
            Metadata, or ``None`` when the account has none
        """
        return await account.get_account_metadata.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_account_transfers(
        self,
        network: str,
        address: str,
        token_id: int = -1,
        contracts: Sequence[str] = (),
        size: int | None = None,
        last_id: str = "",
    ) -> Json:
        return await account.get_account_transfers.asyncio(
            client=self._client,
            network=network,
            address=address,
            token_id=token_id,
            contracts=contracts,
            size=self._size(size),
            last_id=last_id,
        )

    # =========================================================================
    # Big map endpoints
    # =========================================================================

    async def get_big_map(self, network: str, ptr: int) -> Json:
        return await bigmap.get_big_map.asyncio(client=self._client, network=network, ptr=ptr)

    async def get_big_map_diffs_count(self, network: str, ptr: int) -> Json:
        return await bigmap.get_big_map_diffs_count.asyncio(
            client=self._client, network=network, ptr=ptr
        )

    async def get_big_map_keys(self, network: str, ptr: int, q: str = "", offset: int = 0) -> Json:
        return await bigmap.get_big_map_keys.asyncio(
            client=self._client, network=network, ptr=ptr, q=q, offset=offset
        )

    async def get_big_map_actions(self, network: str, ptr: int) -> Json:
        return await bigmap.get_big_map_actions.asyncio(
            client=self._client, network=network, ptr=ptr
        )

    async def get_big_map_history(
        self, network: str, ptr: int, keyhash: str, offset: int = 0
    ) -> Json:
        return await bigmap.get_big_map_history.asyncio(
            client=self._client, network=network, ptr=ptr, keyhash=keyhash, offset=offset
        )

    # =========================================================================
    # Token and statistics endpoints
    # =========================================================================

    async def get_tokens_by_version(
        self, network: str, version: str, offset: int = 0, size: int = 0
    ) -> Json:
        return await stats.get_tokens_by_version.asyncio(
            client=self._client, network=network, version=version, offset=offset, size=size
        )

    async def get_token_volume_series(
        self, network: str, period: str, contract: str, token_id: int, slug: str = ""
    ) -> Json:
        return await stats.get_token_volume_series.asyncio(
            client=self._client,
            network=network,
            period=period,
            contract=contract,
            token_id=token_id,
            slug=slug,
        )

    async def get_stats(self) -> Json:
        return await stats.get_stats.asyncio(client=self._client)

    async def get_network_stats(self, network: str) -> Json:
        return await stats.get_network_stats.asyncio(client=self._client, network=network)

    async def get_network_stats_series(
        self,
        network: str,
        index: str | None,
        period: str | None,
        addresses: Sequence[str] = (),
    ) -> Json:
        return await stats.get_network_stats_series.asyncio(
            client=self._client,
            network=network,
            index=index,
            period=period,
            addresses=addresses,
        )

    async def get_contracts_stats(
        self, network: str, addresses: Sequence[str], period: str
    ) -> Json:
        return await stats.get_contracts_stats.asyncio(
            client=self._client, network=network, addresses=addresses, period=period
        )

    # =========================================================================
    # Profile endpoints
    # =========================================================================

    async def vote(
        self,
        src_network: str,
        src: str,
        dest_network: str,
        dest: str,
        vote: int,
    ) -> Json:
        """Vote on the similarity of two contracts.

        Raises:
            UnauthorizedError: If the session token is missing or expired
        """
        return await profile.vote.asyncio(
            client=self._client,
            src=src,
            src_network=src_network,
            dest=dest,
            dest_network=dest_network,
            vote=vote,
        )

    async def get_tasks(self) -> Json:
        return await profile.get_tasks.asyncio(client=self._client)

    async def generate_tasks(self) -> Json:
        return await profile.generate_tasks.asyncio(client=self._client)

    async def get_profile(self) -> Json:
        """Profile of the authenticated user.

        Raises:
            UnauthorizedError: If the session token is missing or expired
        """
        return await profile.get_profile.asyncio(client=self._client)

    async def profile_mark_all_read(self, timestamp: int) -> Json:
        return await profile.mark_all_read.asyncio(client=self._client, timestamp=timestamp)

    async def get_profile_subscriptions(self) -> Json:
        return await profile.get_subscriptions.asyncio(client=self._client)

    async def add_profile_subscription(self, subscription: Mapping[str, Any]) -> Json:
        return await profile.add_subscription.asyncio(
            client=self._client, body=dict(subscription)
        )

    async def remove_profile_subscription(self, network: str, address: str) -> Json:
        return await profile.remove_subscription.asyncio(
            client=self._client, network=network, address=address
        )

    async def get_profile_events(self, offset: int = 0) -> Json:
        return await profile.get_events.asyncio(
            client=self._client, offset=offset, size=self._page_size
        )

    async def get_profile_accounts(self) -> Json:
        return await profile.get_accounts.asyncio(client=self._client)

    async def get_profile_repos(self, login: str) -> Json:
        return await profile.get_repos.asyncio(client=self._client, login=login)

    async def get_profile_refs(self, owner: str, repo: str) -> Json:
        return await profile.get_refs.asyncio(client=self._client, owner=owner, repo=repo)

    async def get_profile_compilations(self, limit: int = 0, offset: int = 0) -> Json:
        return await profile.get_compilations.asyncio(
            client=self._client, limit=limit, offset=offset
        )

    async def get_verification_list(self) -> Json:
        return await profile.get_verification_list.asyncio(client=self._client)

    async def verify_contract(
        self, network: str, address: str, account: str, repo: str, ref: str
    ) -> Json:
        return await profile.verify_contract.asyncio(
            client=self._client,
            network=network,
            address=address,
            account=account,
            repo=repo,
            ref=ref,
        )

    async def get_deployment_list(self, limit: int = 0, offset: int = 0) -> Json:
        return await profile.get_deployment_list.asyncio(
            client=self._client, limit=limit, offset=offset
        )

    async def deploy_contract(self, network: str, address: str, repo: str, ref: str) -> Json:
        return await profile.deploy_contract.asyncio(
            client=self._client, network=network, address=address, repo=repo, ref=ref
        )

    async def finalize_deploy_contract(self, hash: str, task_id: int, result_id: int) -> Json:
        """Attach the originated operation hash to a deployment task."""
        return await profile.finalize_deployment.asyncio(
            client=self._client, operation_hash=hash, task_id=task_id, result_id=result_id
        )
