"""Static endpoint catalog for the OpenAI REST API.

Each entry is ``(name, method, path_template)``. Paths are relative to the
API base path (``/v1``). Grouped by API area, matching the public reference.
"""
from __future__ import annotations

from typing import Tuple

from .http_method import HttpMethod

GET = HttpMethod.GET
POST = HttpMethod.POST
DELETE = HttpMethod.DELETE

CatalogEntry = Tuple[str, HttpMethod, str]

ENDPOINT_CATALOG: Tuple[CatalogEntry, ...] = (
    # Audio
    ("createSpeech", POST, "/audio/speech"),
    ("createTranscription", POST, "/audio/transcriptions"),
    ("createTranslation", POST, "/audio/translations"),
    # Chat
    ("createChatCompletion", POST, "/chat/completions"),
    ("listChatCompletions", GET, "/chat/completions"),
    ("getChatCompletion", GET, "/chat/completions/{completion_id}"),
    ("getChatMessages", GET, "/chat/completions/{completion_id}/messages"),
    ("updateChatCompletion", POST, "/chat/completions/{completion_id}"),
    ("deleteChatCompletion", DELETE, "/chat/completions/{completion_id}"),
    # Completions (legacy)
    ("createCompletion", POST, "/completions"),
    # Embeddings
    ("createEmbedding", POST, "/embeddings"),
    # Fine-tuning
    ("createFineTuningJob", POST, "/fine_tuning/jobs"),
    ("listPaginatedFineTuningJobs", GET, "/fine_tuning/jobs"),
    ("retrieveFineTuningJob", GET, "/fine_tuning/jobs/{fine_tuning_job_id}"),
    ("cancelFineTuningJob", POST, "/fine_tuning/jobs/{fine_tuning_job_id}/cancel"),
    ("listFineTuningEvents", GET, "/fine_tuning/jobs/{fine_tuning_job_id}/events"),
    ("listFineTuningJobCheckpoints", GET, "/fine_tuning/jobs/{fine_tuning_job_id}/checkpoints"),
    # Batch
    ("createBatch", POST, "/batches"),
    ("retrieveBatch", GET, "/batches/{batch_id}"),
    ("cancelBatch", POST, "/batches/{batch_id}/cancel"),
    ("listBatches", GET, "/batches"),
    # Files
    ("uploadFile", POST, "/files"),
    ("createFile", POST, "/files"),
    ("listFiles", GET, "/files"),
    ("retrieveFile", GET, "/files/{file_id}"),
    ("deleteFile", DELETE, "/files/{file_id}"),
    ("retrieveFileContent", GET, "/files/{file_id}/content"),
    ("downloadFile", GET, "/files/{file_id}/content"),
    # Uploads
    ("createUpload", POST, "/uploads"),
    ("addUploadPart", POST, "/uploads/{upload_id}/parts"),
    ("completeUpload", POST, "/uploads/{upload_id}/complete"),
    ("cancelUpload", POST, "/uploads/{upload_id}/cancel"),
    # Images
    ("createImage", POST, "/images/generations"),
    ("createImageEdit", POST, "/images/edits"),
    ("createImageVariation", POST, "/images/variations"),
    # Models
    ("listModels", GET, "/models"),
    ("retrieveModel", GET, "/models/{model}"),
    ("deleteModel", DELETE, "/models/{model}"),
    # Moderations
    ("createModeration", POST, "/moderations"),
    # Assistants
    ("createAssistant", POST, "/assistants"),
    ("listAssistants", GET, "/assistants"),
    ("retrieveAssistant", GET, "/assistants/{assistant_id}"),
    ("modifyAssistant", POST, "/assistants/{assistant_id}"),
    ("deleteAssistant", DELETE, "/assistants/{assistant_id}"),
    # Threads
    ("createThread", POST, "/threads"),
    ("retrieveThread", GET, "/threads/{thread_id}"),
    ("modifyThread", POST, "/threads/{thread_id}"),
    ("deleteThread", DELETE, "/threads/{thread_id}"),
    # Messages
    ("createMessage", POST, "/threads/{thread_id}/messages"),
    ("listMessages", GET, "/threads/{thread_id}/messages"),
    ("retrieveMessage", GET, "/threads/{thread_id}/messages/{message_id}"),
    ("modifyMessage", POST, "/threads/{thread_id}/messages/{message_id}"),
    ("deleteMessage", DELETE, "/threads/{thread_id}/messages/{message_id}"),
    # Runs
    ("createRun", POST, "/threads/{thread_id}/runs"),
    ("createThreadAndRun", POST, "/threads/runs"),
    ("listRuns", GET, "/threads/{thread_id}/runs"),
    ("retrieveRun", GET, "/threads/{thread_id}/runs/{run_id}"),
    ("modifyRun", POST, "/threads/{thread_id}/runs/{run_id}"),
    ("submitToolOutputsToRun", POST, "/threads/{thread_id}/runs/{run_id}/submit_tool_outputs"),
    ("cancelRun", POST, "/threads/{thread_id}/runs/{run_id}/cancel"),
    # Run steps
    ("listRunSteps", GET, "/threads/{thread_id}/runs/{run_id}/steps"),
    ("retrieveRunStep", GET, "/threads/{thread_id}/runs/{run_id}/steps/{step_id}"),
    # Vector stores
    ("createVectorStore", POST, "/vector_stores"),
    ("listVectorStores", GET, "/vector_stores"),
    ("retrieveVectorStore", GET, "/vector_stores/{vector_store_id}"),
    ("modifyVectorStore", POST, "/vector_stores/{vector_store_id}"),
    ("deleteVectorStore", DELETE, "/vector_stores/{vector_store_id}"),
    ("searchVectorStore", POST, "/vector_stores/{vector_store_id}/search"),
    # Vector store files
    ("createVectorStoreFile", POST, "/vector_stores/{vector_store_id}/files"),
    ("listVectorStoreFiles", GET, "/vector_stores/{vector_store_id}/files"),
    ("retrieveVectorStoreFile", GET, "/vector_stores/{vector_store_id}/files/{file_id}"),
    ("updateVectorStoreFileAttributes", POST, "/vector_stores/{vector_store_id}/files/{file_id}"),
    ("retrieveVectorStoreFileContent", GET, "/vector_stores/{vector_store_id}/files/{file_id}/content"),
    ("deleteVectorStoreFile", DELETE, "/vector_stores/{vector_store_id}/files/{file_id}"),
    # Vector store file batches
    ("createVectorStoreFileBatch", POST, "/vector_stores/{vector_store_id}/file_batches"),
    ("retrieveVectorStoreFileBatch", GET, "/vector_stores/{vector_store_id}/file_batches/{batch_id}"),
    ("cancelVectorStoreFileBatch", POST, "/vector_stores/{vector_store_id}/file_batches/{batch_id}/cancel"),
    ("listVectorStoreFilesInABatch", GET, "/vector_stores/{vector_store_id}/file_batches/{batch_id}/files"),
    # Responses
    ("createResponse", POST, "/responses"),
    ("getResponse", GET, "/responses/{response_id}"),
    ("deleteResponse", DELETE, "/responses/{response_id}"),
    ("cancelResponse", POST, "/responses/{response_id}/cancel"),
    ("listInputItems", GET, "/responses/{response_id}/input_items"),
    # Administration: admin API keys
    ("listAdminApiKeys", GET, "/organization/admin_api_keys"),
    ("createAdminApiKey", POST, "/organization/admin_api_keys"),
    ("retrieveAdminApiKey", GET, "/organization/admin_api_keys/{key_id}"),
    ("deleteAdminApiKey", DELETE, "/organization/admin_api_keys/{key_id}"),
    # Administration: invites
    ("listInvites", GET, "/organization/invites"),
    ("createInvite", POST, "/organization/invites"),
    ("retrieveInvite", GET, "/organization/invites/{invite_id}"),
    ("deleteInvite", DELETE, "/organization/invites/{invite_id}"),
    # Administration: users
    ("listUsers", GET, "/organization/users"),
    ("modifyUser", POST, "/organization/users/{user_id}"),
    ("retrieveUser", GET, "/organization/users/{user_id}"),
    ("deleteUser", DELETE, "/organization/users/{user_id}"),
    # Administration: projects
    ("listProjects", GET, "/organization/projects"),
    ("createProject", POST, "/organization/projects"),
    ("retrieveProject", GET, "/organization/projects/{project_id}"),
    ("modifyProject", POST, "/organization/projects/{project_id}"),
    ("archiveProject", POST, "/organization/projects/{project_id}/archive"),
    # Administration: project users
    ("listProjectUsers", GET, "/organization/projects/{project_id}/users"),
    ("createProjectUser", POST, "/organization/projects/{project_id}/users"),
    ("retrieveProjectUser", GET, "/organization/projects/{project_id}/users/{user_id}"),
    ("modifyProjectUser", POST, "/organization/projects/{project_id}/users/{user_id}"),
    ("deleteProjectUser", DELETE, "/organization/projects/{project_id}/users/{user_id}"),
    # Administration: project service accounts
    ("listProjectServiceAccounts", GET, "/organization/projects/{project_id}/service_accounts"),
    ("createProjectServiceAccount", POST, "/organization/projects/{project_id}/service_accounts"),
    ("retrieveProjectServiceAccount", GET, "/organization/projects/{project_id}/service_accounts/{service_account_id}"),
    ("deleteProjectServiceAccount", DELETE, "/organization/projects/{project_id}/service_accounts/{service_account_id}"),
    # Administration: project API keys
    ("listProjectApiKeys", GET, "/organization/projects/{project_id}/api_keys"),
    ("retrieveProjectApiKey", GET, "/organization/projects/{project_id}/api_keys/{key_id}"),
    ("deleteProjectApiKey", DELETE, "/organization/projects/{project_id}/api_keys/{key_id}"),
    # Administration: project rate limits
    ("listProjectRateLimits", GET, "/organization/projects/{project_id}/rate_limits"),
    ("modifyProjectRateLimit", POST, "/organization/projects/{project_id}/rate_limits/{rate_limit_id}"),
    # Administration: audit logs
    ("listAuditLogs", GET, "/organization/audit_logs"),
    # Administration: certificates
    ("listOrganizationCertificates", GET, "/organization/certificates"),
    ("uploadCertificate", POST, "/organization/certificates"),
    ("activateOrganizationCertificates", POST, "/organization/certificates/activate"),
    ("deactivateOrganizationCertificates", POST, "/organization/certificates/deactivate"),
    ("getCertificate", GET, "/organization/certificates/{certificate_id}"),
    ("modifyCertificate", POST, "/organization/certificates/{certificate_id}"),
    ("deleteCertificate", DELETE, "/organization/certificates/{certificate_id}"),
    ("listProjectCertificates", GET, "/organization/projects/{project_id}/certificates"),
    ("activateProjectCertificates", POST, "/organization/projects/{project_id}/certificates/activate"),
    ("deactivateProjectCertificates", POST, "/organization/projects/{project_id}/certificates/deactivate"),
    # Administration: usage and costs
    ("usageCompletions", GET, "/organization/usage/completions"),
    ("usageEmbeddings", GET, "/organization/usage/embeddings"),
    ("usageModerations", GET, "/organization/usage/moderations"),
    ("usageImages", GET, "/organization/usage/images"),
    ("usageAudioSpeeches", GET, "/organization/usage/audio_speeches"),
    ("usageAudioTranscriptions", GET, "/organization/usage/audio_transcriptions"),
    ("usageVectorStores", GET, "/organization/usage/vector_stores"),
    ("usageCodeInterpreterSessions", GET, "/organization/usage/code_interpreter_sessions"),
    ("usageCosts", GET, "/organization/costs"),
    # Realtime
    ("createRealtimeSession", POST, "/realtime/sessions"),
    ("createRealtimeTranscriptionSession", POST, "/realtime/transcription_sessions"),
)

__all__ = ["ENDPOINT_CATALOG", "CatalogEntry"]
