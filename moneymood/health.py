"""Health checks for the rate source and the rate cache."""
from typing import Dict, Any
from datetime import datetime, timezone
from moneymood.currency.rate_provider import RateProvider
from moneymood.utils.errors import DataProviderError
from moneymood.utils.logging import get_logger

logger = get_logger(__name__)


class HealthStatus:
    """Health check status."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"


async def check_rate_source(provider: RateProvider) -> Dict[str, Any]:
    """Check that the live rate source answers.

    A successful check refreshes the provider's cache. A dead source only
    degrades the app, since conversions fall back to the static table.
    """
    try:
        rates = await provider.refresh()
        return {
            "status": HealthStatus.HEALTHY,
            "message": f"Rate source returned {len(rates)} rates"
        }
    except DataProviderError as e:
        logger.warning(f"Rate source health check failed: {e}")
        return {
            "status": HealthStatus.DEGRADED,
            "message": f"Rate source unavailable, fallback rates in use: {e}"
        }


async def check_cache(provider: RateProvider) -> Dict[str, Any]:
    """Report rate cache age."""
    now = provider.clock()
    age = provider.cache.age(now)
    if age is None:
        return {
            "status": HealthStatus.DEGRADED,
            "message": "Rate cache is empty"
        }
    if provider.cache.is_fresh(now):
        return {
            "status": HealthStatus.HEALTHY,
            "message": f"Rate cache is fresh ({int(age.total_seconds())}s old)"
        }
    return {
        "status": HealthStatus.DEGRADED,
        "message": f"Rate cache is stale ({int(age.total_seconds())}s old)"
    }


async def get_health_status(provider: RateProvider) -> Dict[str, Any]:
    """
    Get overall health status.
    
    Returns:
        Dict containing overall status and component statuses
    """
    # The cache check reads what the rate source check just refreshed
    checks = []
    for check in (check_rate_source, check_cache):
        try:
            checks.append(await check(provider))
        except Exception as e:
            checks.append(e)
    
    components = {}
    for name, result in zip(("rate_source", "cache"), checks):
        if isinstance(result, dict):
            components[name] = result
        else:
            logger.error(f"Health check {name} raised: {result}")
            components[name] = {"status": HealthStatus.UNHEALTHY, "message": str(result)}
    
    statuses = [c["status"] for c in components.values()]
    if all(s == HealthStatus.HEALTHY for s in statuses):
        overall_status = HealthStatus.HEALTHY
    elif any(s == HealthStatus.UNHEALTHY for s in statuses):
        overall_status = HealthStatus.UNHEALTHY
    else:
        overall_status = HealthStatus.DEGRADED
    
    return {
        "status": overall_status,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": components,
    }
