from fastapi import APIRouter, Depends, HTTPException, Response

from govdash.adapters.bcp import (
    adapt_bcp_plan, adapt_bcp_plan_update, adapt_bcp_test, adapt_bcp_test_create,
    adapt_bcp_test_update, adapt_business_service, adapt_business_service_create,
    adapt_business_service_update, adapt_dr_plan, adapt_dr_plan_update,
    adapt_dr_site, adapt_dr_site_write,
)
from govdash.adapters.codec import decode
from govdash.client import BackendClient, get_backend
from govdash.schemas.bcp import (
    BCPPlan, BCPPlanUpdate, BCPService, BCPServiceCreate, BCPServiceUpdate,
    BCPTest, BCPTestCreate, BCPTestUpdate, DRPlan, DRPlanUpdate, DRSite,
    DRSiteWrite,
)

router = APIRouter()


# --- Plans ---

@router.get("/plan", response_model=BCPPlan)
async def get_bcp_plan(backend: BackendClient = Depends(get_backend)):
    return adapt_bcp_plan(await backend.get("/bcp/plan"))


@router.patch("/plan", response_model=BCPPlan)
async def update_bcp_plan(body: BCPPlanUpdate, backend: BackendClient = Depends(get_backend)):
    return adapt_bcp_plan(await backend.patch("/bcp/plan", adapt_bcp_plan_update(body)))


@router.get("/dr-plan", response_model=DRPlan)
async def get_dr_plan(backend: BackendClient = Depends(get_backend)):
    return adapt_dr_plan(await backend.get("/bcp/dr-plan"))


@router.patch("/dr-plan", response_model=DRPlan)
async def update_dr_plan(body: DRPlanUpdate, backend: BackendClient = Depends(get_backend)):
    return adapt_dr_plan(await backend.patch("/bcp/dr-plan", adapt_dr_plan_update(body)))


# --- Business services ---

@router.get("/services", response_model=list[BCPService])
async def list_services(backend: BackendClient = Depends(get_backend)):
    return [adapt_business_service(s) for s in await backend.get("/bcp/services") or []]


@router.get("/services/{service_id}", response_model=BCPService)
async def get_service(service_id: str, backend: BackendClient = Depends(get_backend)):
    service = await backend.get(f"/bcp/services/{decode(service_id)}")
    if not service:
        raise HTTPException(status_code=404, detail="Service not found")
    return adapt_business_service(service)


@router.post("/services", response_model=BCPService, status_code=201)
async def create_service(body: BCPServiceCreate, backend: BackendClient = Depends(get_backend)):
    return adapt_business_service(await backend.post("/bcp/services", adapt_business_service_create(body)))


@router.put("/services/{service_id}", response_model=BCPService)
async def update_service(service_id: str, body: BCPServiceUpdate, backend: BackendClient = Depends(get_backend)):
    updated = await backend.put(f"/bcp/services/{decode(service_id)}", adapt_business_service_update(body))
    return adapt_business_service(updated)


@router.delete("/services/{service_id}", status_code=204)
async def delete_service(service_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/bcp/services/{decode(service_id)}")
    return Response(status_code=204)


# --- DR sites ---

@router.get("/dr-sites", response_model=list[DRSite])
async def list_dr_sites(backend: BackendClient = Depends(get_backend)):
    return [adapt_dr_site(s) for s in await backend.get("/bcp/dr-sites") or []]


@router.get("/dr-sites/{site_id}", response_model=DRSite)
async def get_dr_site(site_id: str, backend: BackendClient = Depends(get_backend)):
    site = await backend.get(f"/bcp/dr-sites/{decode(site_id)}")
    if not site:
        raise HTTPException(status_code=404, detail="DR site not found")
    return adapt_dr_site(site)


@router.post("/dr-sites", response_model=DRSite, status_code=201)
async def create_dr_site(body: DRSiteWrite, backend: BackendClient = Depends(get_backend)):
    if not body.name:
        raise HTTPException(status_code=422, detail="DR site name is required")
    return adapt_dr_site(await backend.post("/bcp/dr-sites", adapt_dr_site_write(body)))


@router.put("/dr-sites/{site_id}", response_model=DRSite)
async def update_dr_site(site_id: str, body: DRSiteWrite, backend: BackendClient = Depends(get_backend)):
    updated = await backend.put(f"/bcp/dr-sites/{decode(site_id)}", adapt_dr_site_write(body))
    return adapt_dr_site(updated)


@router.delete("/dr-sites/{site_id}", status_code=204)
async def delete_dr_site(site_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/bcp/dr-sites/{decode(site_id)}")
    return Response(status_code=204)


# --- BCP / DR tests ---

@router.get("/tests", response_model=list[BCPTest])
async def list_tests(backend: BackendClient = Depends(get_backend)):
    return [adapt_bcp_test(t) for t in await backend.get("/bcp/tests") or []]


@router.get("/tests/{test_id}", response_model=BCPTest)
async def get_test(test_id: str, backend: BackendClient = Depends(get_backend)):
    test = await backend.get(f"/bcp/tests/{decode(test_id)}")
    if not test:
        raise HTTPException(status_code=404, detail="Test not found")
    return adapt_bcp_test(test)


@router.post("/tests", response_model=BCPTest, status_code=201)
async def create_test(body: BCPTestCreate, backend: BackendClient = Depends(get_backend)):
    return adapt_bcp_test(await backend.post("/bcp/tests", adapt_bcp_test_create(body)))


@router.put("/tests/{test_id}", response_model=BCPTest)
async def update_test(test_id: str, body: BCPTestUpdate, backend: BackendClient = Depends(get_backend)):
    return adapt_bcp_test(await backend.put(f"/bcp/tests/{decode(test_id)}", adapt_bcp_test_update(body)))


@router.delete("/tests/{test_id}", status_code=204)
async def delete_test(test_id: str, backend: BackendClient = Depends(get_backend)):
    await backend.delete(f"/bcp/tests/{decode(test_id)}")
    return Response(status_code=204)


@router.get("/statistics")
async def bcp_statistics(backend: BackendClient = Depends(get_backend)):
    return await backend.get("/bcp/statistics") or {}
