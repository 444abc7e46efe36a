"""Plugin hook specifications for the search subsystem.

This module declares the extension points of the host search subsystem
using pluggy's hookspec decorator. Extensions implement these hooks (marked
with `hookimpl`) to contribute services, processors and data alterations,
or to react to server and index lifecycle events.

The host fires the lifecycle hooks; this package only declares them and
implements `search_api_processor_info` for its own processors.
"""

import pluggy

PROJECT_NAME = "search_api"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


@hookspec
def search_api_service_info():
    """
    Define one or more search service classes.

    Returns:
        Dict keyed by service id with keys:
        - name: Service class name shown to administrators
        - description: What the service offers
        - class: The service class
        - init_args: (optional) Arguments passed to the service's init
    """


@hookspec
def search_api_service_info_alter(service_info):
    """
    Alter the collected service definitions in place.

    Args:
        service_info: Dict of all service definitions, keyed by service id
    """


@hookspec
def search_api_alter_callback_info():
    """
    Register callbacks run at index time to add, alter or remove item data.

    Returns:
        Dict keyed by callback name with keys name, description and an
        optional weight (default 0) that orders the callbacks.
    """


@hookspec
def search_api_processor_info():
    """
    Register one or more processors.

    Processors pre-process item data at index time (and may pre-process
    queries or post-process results at search time).

    Returns:
        Dict of processor id -> ProcessorInfo

    Example:
        @hookimpl
        def search_api_processor_info():
            return {
                "example_processor": ProcessorInfo(
                    id="example_processor",
                    name="Example processor",
                    processor_class=ExampleProcessor,
                    weight=-1,
                ),
            }
    """


@hookspec
def search_api_processor_info_alter(processor_info):
    """
    Alter the collected processor definitions in place.

    Args:
        processor_info: Dict of processor id -> ProcessorInfo
    """


@hookspec
def search_api_query_alter(query, index):
    """
    Alter a search query before it is executed.

    Args:
        query: The query object
        index: The index the query runs on; must not be altered
    """


@hookspec
def search_api_server_load(servers):
    """Act on search servers when they are loaded."""


@hookspec
def search_api_server_insert(server):
    """A new search server was created."""


@hookspec
def search_api_server_update(server, op):
    """
    A search server was edited, enabled or disabled.

    Args:
        server: The edited server
        op: 'enable', 'disable' or 'edit'
    """


@hookspec
def search_api_server_delete(server):
    """A search server was deleted."""


@hookspec
def search_api_index_load(indexes):
    """Act on search indexes when they are loaded."""


@hookspec
def search_api_index_insert(index):
    """A new search index was created."""


@hookspec
def search_api_index_update(index, op):
    """
    A search index was edited in any way.

    Includes enabling, disabling, clearing and scheduling for re-indexing.

    Args:
        index: The edited index
        op: 'enable', 'disable', 'edit', 'reindex', 'clear' or 'fields'
    """


@hookspec
def search_api_index_delete(index):
    """A search index was deleted."""
