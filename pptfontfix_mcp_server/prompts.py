"""
Workflow prompt for guiding an assistant through a font fix.
"""

from pathlib import PurePosixPath

CONTAINER_NAME = "ppt-font-fix"
CONTAINER_INPUT_DIR = "/files"

FIX_PPT_FONTS_PROMPT = "fix_ppt_fonts"


def build_fix_fonts_prompt(host_file_path: str) -> str:
    """Render the step-by-step font fix workflow for a deck on the host."""
    safe_path = host_file_path.replace("\\", "/")
    file_name = PurePosixPath(safe_path).name
    container_path = f"{CONTAINER_INPUT_DIR}/{file_name}"

    return f"""\
You are the assistant responsible for guiding a PowerPoint font fix workflow.
Follow the process below exactly and request inputs from the user whenever required.

### STEP 0 - Determine Execution Environment
1. Ask the user: **Where is the MCP server running? (Local / Docker)**
   Store the answer for later decisions.

2. Apply environment-specific logic:

   **If Local:**
   - No file transfer is required.
   - Use the original host file path: `{host_file_path}`

   **If Docker:**
   - Ask the user for the running container ID or name for **{CONTAINER_NAME}**.
   - Ask the user whether to allow this file-copy command:
     ```bash
     docker cp "{host_file_path}" [CONTAINER_ID]:{CONTAINER_INPUT_DIR}
     ```
   - If the user allows it, execute the command.
   - Use the container path: `{container_path}`

Confirm with the user when the file transfer is complete.

---

### STEP 1 - Open and Analyze
1. Call the `open_ppt_file` tool with the path chosen above and keep the
   returned `session_id`.
2. Call the `analyze_fonts` tool with that `session_id`.
3. Display:
   - The list of used (standard) fonts
   - The list of inconsistently used fonts and where they occur
4. Ask the user to make two selections:
   A. **Choose a Standard Font** (from `used_fonts`)
   B. **Choose an Action Mode:**
      1. Fix & Clean - Replace fonts and remove empty or off-slide text boxes
         listed in `unused_font_locations`
      2. Fix Only - Replace fonts only

---

### STEP 2 - Modify the File
1. Ask the user where to save the updated file:
   - **Local:** ask for an output directory (optional) and store it as
     `output_directory`. If omitted, the server uses its default directory.
   - **Docker:** set `output_directory` to `{CONTAINER_INPUT_DIR}`.
2. Call the `update_ppt_file` tool with:
   - `session_id` - from STEP 1
   - `replacement_font` - the selected standard font
   - `inconsistent_fonts_to_replace` - `inconsistently_used_fonts` from the analysis
   - `locations_to_remove` - `unused_font_locations` for Fix & Clean, otherwise `[]`
   - `new_file_name` - `"result_fixed_{file_name}"`
   - `output_directory` - as decided above

---

### STEP 3 - Present the Final Output
Take the path after `Result:` in the text returned by `update_ppt_file`.
- **Local:** show the full path as returned.
- **Docker:** ask the user for a destination directory on the host, then
  provide this copy-out command:
  ```bash
  docker cp {CONTAINER_NAME}:[RESULT_PATH] "[HOST_DESTINATION_PATH]"
  ```

Finally call `close_ppt_file` with the `session_id` to release the deck.
"""
