from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from hbasectl.modules import pre_upgrade
from hbasectl.modules.hbase import HBaseAdmin, HBaseError

router = APIRouter()


class PreUpgradeRequest(BaseModel):
    all: bool = False
    validate_dbe: bool = False


@router.post("/pre-upgrade")
def run_pre_upgrade(req: PreUpgradeRequest):
    names = pre_upgrade.select_validations(req.all, ["validateDBE"] if req.validate_dbe else [])
    try:
        results = pre_upgrade.run_validations(names, HBaseAdmin)
    except HBaseError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {
        "status": "success" if pre_upgrade.all_passed(results) else "failed",
        "results": [r.to_dict() for r in results],
    }
