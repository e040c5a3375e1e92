"""
Dependencies module - Reusable FastAPI dependencies.

Route handlers receive the generation gateway through Depends(get_gateway),
so tests can swap in a gateway with a fake client via
app.dependency_overrides[get_gateway].
"""

from creatortune.ai.gateway import GenerationGateway, gateway


def get_gateway() -> GenerationGateway:
    """
    Provide the process-wide generation gateway.

    Usage in routes:
        @router.post("/operations/{operation_name}")
        async def run(gw: GenerationGateway = Depends(get_gateway)):
            ...
    """
    return gateway
